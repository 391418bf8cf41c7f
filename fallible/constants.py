# Raised by throw() when a Failure carries no message and none is given
DEFAULT_ERROR_MESSAGE = "There was an error! No specific error message was provided."

# Environment
ENV_PREFIX = "FALLIBLE_"
ENV_FILE = ".env"
