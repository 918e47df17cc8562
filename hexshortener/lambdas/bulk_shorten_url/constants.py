# Log event codes of the bulk_shorten_url handler
BULK_SHORTEN_SUCCESS = 'BULK_SHORTEN_SUCCESS'
BULK_SHORTEN_REJECTED = 'BULK_SHORTEN_REJECTED'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
