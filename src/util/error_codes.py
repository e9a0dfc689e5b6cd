# Validation (1000-1999)
MISSING_ADDRESS = 1001

# External Service (5000-5999)
HISTORY_FETCH_FAILED = 5001
PRICE_FETCH_FAILED = 5002

# Configuration (7000-7999)
MISSING_API_KEY = 7001
