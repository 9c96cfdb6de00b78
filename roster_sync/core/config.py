import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    EMPLOYEE_API_URL: str = "http://localhost:8080"
    EMPLOYEE_API_PATH: str = "/employeeapi"
    # None means requests wait indefinitely
    HTTP_TIMEOUT_SECONDS: float | None = None

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def employee_api_base(self) -> str:
        if not self.EMPLOYEE_API_URL:
            return ""
        path = self.EMPLOYEE_API_PATH.strip("/")
        base = self.EMPLOYEE_API_URL.rstrip("/")
        return f"{base}/{path}" if path else base


settings = Settings()
