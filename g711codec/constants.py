"""Constants for the G.711 codec.

The companding constants below are normative values of ITU-T G.711. They
are kept here by name so every bit-level operation in the codec can be
audited against the Recommendation.
"""

VERSION = "1.0.0"

# Linear PCM domain (machine-native signed 16-bit)
PCM_MIN = -0x8000
PCM_MAX = 0x7FFF
PCM_SAMPLE_BYTES = 2

# Companded code domain
CODE_MIN = 0x00
CODE_MAX = 0xFF
CODE_COUNT = 0x100
PCM_COUNT = 0x10000

# Sign bit of a companded code (set = non-negative for both laws)
SIGN_BIT = 0x80

# A-law
ALAW_INVERT_MASK = 0x55  # alternate bits inverted for transmission
ALAW_MAGNITUDE_MASK = 0x7F
ALAW_MANTISSA_MASK = 0x1F  # segment LSB + interval, decoded together
ALAW_SEGMENT_THRESHOLD = 0x20
ALAW_SEGMENT_MSB = 0x100
ALAW_HALF_STEP = 0x08
ALAW_DROP_BITS = 4

# µ-law
ULAW_INVERT_MASK = 0xFF  # every bit inverted for transmission
ULAW_BIAS = 0x84
ULAW_CLIP = 0x7F00
ULAW_DROP_BITS = 3
ULAW_INTERVAL_MASK = 0x0F
ULAW_SEGMENT_MASK = 0x07

# Segment search shared by both encoders: (threshold, shift, segment increment)
SEGMENT_STEPS = (
    (0x100, 4, 0x40),
    (0x40, 2, 0x20),
    (0x20, 1, 0x10),
)

# Default file transcoding parameters
DEFAULT_SAMPLE_RATE = 8000
DEFAULT_CHANNELS = 1
AUDIO_CHUNK_SIZE = 4096
