# Log event codes of the redirect_url handler
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
REDIRECT_REJECTED = 'REDIRECT_REJECTED'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
