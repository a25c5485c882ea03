"""Application constants."""

# MM-DD-YY, two ASCII digits each; no calendar check
EXERCISE_DATE_PATTERN = r"^[0-9]{2}-[0-9]{2}-[0-9]{2}$"

# Error bodies are {"Error": <message>}
ERROR_KEY = "Error"
INVALID_REQUEST = "Invalid request"
NOT_FOUND = "Not found"
REQUEST_FAILED = "Request failed"

# reps/weight/limit are stored in 32-bit INTEGER columns
MAX_INT = 2**31 - 1
