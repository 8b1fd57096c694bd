# src/address_geocoder/core/config.py
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class Settings(BaseSettings):
    # Google Maps API key used to authenticate every request
    google_maps_api_key: str = Field("", validation_alias="GOOGLE_MAPS_API_KEY")
    # default lookup type: 'address' or 'lat-lng'
    lookup_mode: str = Field("address", validation_alias="GEOCODE_LOOKUP_TYPE")
    # narrows search results to one country when set
    country_code: Optional[str] = Field(None, validation_alias="GEOCODE_COUNTRY_CODE")
    geocode_url: str = Field(GOOGLE_GEOCODE_URL, validation_alias="GEOCODE_URL")
    timeout: float = Field(10, validation_alias="GEOCODE_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


settings = Settings()
