from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Deck Builder"
    COMPANY_EMAIL: str = ""
    COMPANY_PHONE: str = ""

    # Canvas / rendering
    CANVAS_PADDING: float = 40.0
    DEFAULT_CANVAS_WIDTH: int = 800
    DEFAULT_CANVAS_HEIGHT: int = 600
    MAX_CANVAS_SIZE: int = 4096

    # Isometric drag rotation, degrees per pixel of horizontal drag
    ROTATION_SENSITIVITY: float = 0.5

    class Config:
        env_file = ".env"


settings = Settings()
