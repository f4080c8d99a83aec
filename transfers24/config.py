from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .credentials import Credentials, CredentialsMode


load_dotenv()


class Settings(BaseModel):
    credentials_scope: bool = Field(default=False, alias="TRANSFERS24_CREDENTIALS_SCOPE")

    merchant_id: str = Field(default="", alias="TRANSFERS24_MERCHANT_ID")
    pos_id: str = Field(default="", alias="TRANSFERS24_POS_ID")
    crc: str = Field(default="", alias="TRANSFERS24_CRC")
    test_mode: bool | None = Field(default=None, alias="TRANSFERS24_TEST_MODE")

    gateway: str = Field(default="transfers24", alias="TRANSFERS24_GATEWAY")
    timeout: float = Field(default=10.0, alias="TRANSFERS24_TIMEOUT")
    api_version: str = Field(default="3.2", alias="TRANSFERS24_API_VERSION")

    url_return: str = Field(default="", alias="TRANSFERS24_URL_RETURN")
    url_status: str = Field(default="", alias="TRANSFERS24_URL_STATUS")

    class Config:
        populate_by_name = True

    @field_validator("test_mode", mode="before")
    @classmethod
    def _empty_test_mode(cls, value: object) -> object:
        # An empty value means no environment was chosen.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def credentials_mode(self) -> CredentialsMode:
        return CredentialsMode.from_scope(self.credentials_scope)

    def credentials(self) -> Credentials:
        return Credentials(
            pos_id=self.pos_id or self.merchant_id,
            merchant_id=self.merchant_id,
            crc=self.crc,
            test_mode=self.test_mode,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(**os.environ)
