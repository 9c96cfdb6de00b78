"""Employee record, form buffer and form mode models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Fixed field order: validation reports the first unset field in this order
# and the roster table renders its columns in it.
EMPLOYEE_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "gender",
    "department",
    "email",
    "contact",
    "salary",
)


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class Employee(BaseModel):
    """An employee record as returned by the remote collection."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: int
    name: str
    gender: Gender
    department: str
    email: str
    contact: str
    salary: str


class UnknownFieldError(KeyError):
    """Raised when a form field name is not part of the employee shape."""


class EmployeeForm(BaseModel):
    """The single editable working copy. Every field starts out unset ("")."""

    model_config = ConfigDict(coerce_numbers_to_str=True, validate_assignment=True)

    id: int | str = ""
    name: str = ""
    gender: str = ""
    department: str = ""
    email: str = ""
    contact: str = ""
    salary: str = ""

    @classmethod
    def empty(cls) -> EmployeeForm:
        return cls()

    @classmethod
    def from_employee(cls, record: Employee) -> EmployeeForm:
        return cls.model_validate(record.model_dump(mode="json"))

    def set_field(self, name: str, value: Any) -> None:
        if name not in EMPLOYEE_FIELDS:
            raise UnknownFieldError(name)
        setattr(self, name, "" if value is None else value)

    def payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class Creating(BaseModel):
    kind: Literal["creating"] = "creating"


class Editing(BaseModel):
    kind: Literal["editing"] = "editing"
    original_id: int


FormMode = Annotated[Union[Creating, Editing], Field(discriminator="kind")]
