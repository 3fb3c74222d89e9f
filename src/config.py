from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Housing Listings API"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Routing
    api_prefix: str = "/api"
    api_version: str = "v1"

    # Listing source (JSON array of listing records)
    listings_data_path: str = "data/listings.json"

    similar_listings_default_limit: int = 5
    similar_listings_max_limit: int = 50

    @property
    def api_base_path(self) -> str:
        return f"{self.api_prefix.rstrip('/')}/{self.api_version.strip('/')}"


settings = Settings()
