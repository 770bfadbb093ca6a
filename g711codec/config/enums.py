"""Configuration enums for the G.711 codec."""

from enum import Enum


class CompandingLaw(str, Enum):
    """The two companding laws defined by G.711."""

    ALAW = "alaw"
    ULAW = "ulaw"

    @classmethod
    def parse(cls, value: str) -> "CompandingLaw":
        """Return the law named by ``value``, accepting common aliases."""
        key = value.strip().lower().replace("-", "").replace("_", "")
        law = _LAW_ALIASES.get(key)
        if law is None:
            raise ValueError(f"Invalid companding law: {value}")
        return law

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value


_LAW_ALIASES = {
    "alaw": CompandingLaw.ALAW,
    "a": CompandingLaw.ALAW,
    "pcma": CompandingLaw.ALAW,
    "ulaw": CompandingLaw.ULAW,
    "u": CompandingLaw.ULAW,
    "mulaw": CompandingLaw.ULAW,
    "µlaw": CompandingLaw.ULAW,
    "pcmu": CompandingLaw.ULAW,
}


class ByteOrder(str, Enum):
    """Byte order of 16-bit samples in raw PCM files."""

    LITTLE = "little"
    BIG = "big"
    NATIVE = "native"

    @property
    def dtype_code(self) -> str:
        """Return the NumPy byte order character for this order."""
        return {"little": "<", "big": ">", "native": "="}[self.value]

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value
