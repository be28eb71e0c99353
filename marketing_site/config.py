from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "SmartHoster"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Public site settings
    site_url: str = "https://www.smarthoster.io"
    site_name: str = "SmartHoster"
    default_og_image: str = "https://www.smarthoster.io/og-image.jpg"

    # Owner portal (separate app reachable under /portal)
    owner_portal_url: str = "http://localhost:3000"

    # CMS settings
    cms_base_url: str = "https://smarthoster-blogs.onrender.com"
    cms_api_token: str | None = None
    cms_timeout: float = 10.0

    # Logging settings
    log_level: str = "INFO"
    json_logs: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
