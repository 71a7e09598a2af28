"""
Error codes carried by RiotApiError.

Only the account lookup treats these as fatal. Every later stage turns them
into warning strings and keeps going with partial data.
"""

MISSING_RIOT_API_KEY = "MISSING_RIOT_API_KEY"
INVALID_RIOT_ID = "INVALID_RIOT_ID"
ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
MATCH_NOT_FOUND = "MATCH_NOT_FOUND"
RIOT_UNAUTHORIZED = "RIOT_UNAUTHORIZED"
RIOT_FORBIDDEN = "RIOT_FORBIDDEN"
RIOT_RATE_LIMIT = "RIOT_RATE_LIMIT"
RIOT_UPSTREAM_ERROR = "RIOT_UPSTREAM_ERROR"
