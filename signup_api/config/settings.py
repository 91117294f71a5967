from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""  # anon key, used for sign-up and table access
    supabase_service_role_key: Optional[str] = None  # Required for admin operations like deleting auth users

    # Tables
    users_table: str = "users"
    animation_services_table: str = "animation_services"

    # Registration
    password_min_length: int = 6

    # App
    app_name: str = "signup-api"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    api_prefix: str = "/api"
    static_dir: str = "public"
    cors_origins: str = "https://wowdrone.webflow.io,http://localhost:3000,https://server-pre-deploy.vercel.app"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
