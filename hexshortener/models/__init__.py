from hexshortener.models.short_url_model import ShortURLModel
from hexshortener.models.shorten_models import ShortenRequest, ShortenResult


__all__ = [
    'ShortURLModel',
    'ShortenRequest',
    'ShortenResult',
]
