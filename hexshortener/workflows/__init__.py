from hexshortener.workflows.shorten import ShortenWorkflow, parse_duration
from hexshortener.workflows.bulk import BulkShortenWorkflow, parse_bulk_body
from hexshortener.workflows.resolve import ResolveWorkflow


__all__ = [
    'ShortenWorkflow',
    'BulkShortenWorkflow',
    'ResolveWorkflow',
    'parse_duration',
    'parse_bulk_body',
]
