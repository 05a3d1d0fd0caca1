WORD_BITS = 64
WORD_MIN = -(1 << (WORD_BITS - 1))
WORD_MAX = (1 << (WORD_BITS - 1)) - 1

# Outputs at or above this value are not text
ASCII_LIMIT = 128
NEWLINE = 10

NETWORK_SIZE = 50
NAT_ADDRESS = 255
NO_PACKET = -1
IDLE_THRESHOLD = 2
