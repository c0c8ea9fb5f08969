from pydantic_settings import BaseSettings

# Wire surface and log level are fixed; none of them is read from the environment.
HOST = "0.0.0.0"
PORT = 9090
API_PREFIX = "/api"
LOG_LEVEL = "INFO"

class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"

    class Config:
        env_file = ".env"

settings = Settings()
