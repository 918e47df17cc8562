# Log event codes of the shorten_url handler
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
SHORTEN_REJECTED = 'SHORTEN_REJECTED'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
