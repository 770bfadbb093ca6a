"""Pydantic models for G.711 transcoding configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from g711codec.config.enums import CompandingLaw, ByteOrder
from g711codec.constants import DEFAULT_SAMPLE_RATE, DEFAULT_CHANNELS, AUDIO_CHUNK_SIZE


class TranscodeOptions(BaseModel):
    """Options controlling file transcoding."""

    model_config = ConfigDict(extra="forbid")

    law: CompandingLaw = CompandingLaw.ALAW
    byteorder: ByteOrder = ByteOrder.LITTLE
    sample_rate: int = Field(DEFAULT_SAMPLE_RATE, ge=1, description="Sample rate written to decoded WAV files")
    channels: int = Field(DEFAULT_CHANNELS, ge=1, description="Interleaved channels in code and raw PCM files")
    chunk_size: int = Field(AUDIO_CHUNK_SIZE, ge=1, description="Frames converted per batch call")

    @field_validator("law", mode="before")
    @classmethod
    def validate_law(cls, value) -> CompandingLaw:
        if isinstance(value, str):
            return CompandingLaw.parse(value)
        return value

    @field_validator("byteorder", mode="before")
    @classmethod
    def validate_byteorder(cls, value) -> ByteOrder:
        if isinstance(value, str):
            try:
                return ByteOrder(value.strip().lower())
            except ValueError:
                raise ValueError(f"Invalid byte order: {value}")
        return value
