from pydantic import BaseModel, Field

FIELD_DELIMITER = "~"
TOKEN_NAME = "hdnts"


class TokenRequest(BaseModel):
    stream_id: str
    secret: str = Field(..., min_length=1)
    start_time: int | None = None
    end_time: int
    lifetime: int | None = None
    ip: str | None = None
    # Parsed from --vod but never emitted or signed.
    vod_stream_id: str | None = None

    class Config:
        frozen = True


class TokenFields(BaseModel):
    public_fields: tuple[str, ...]
    signed_fields: tuple[str, ...]

    class Config:
        frozen = True

    @property
    def public_string(self) -> str:
        return FIELD_DELIMITER.join(self.public_fields)

    @property
    def signed_string(self) -> str:
        return FIELD_DELIMITER.join(self.signed_fields)


class SignedToken(BaseModel):
    public_string: str
    digest: str = Field(..., min_length=64, max_length=64)

    class Config:
        frozen = True

    def render(self) -> str:
        return f"{TOKEN_NAME}={self.public_string}{FIELD_DELIMITER}hmac={self.digest}"
