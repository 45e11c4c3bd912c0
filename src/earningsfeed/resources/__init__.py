"""
Resource namespaces exposed on the client.
"""

from earningsfeed.resources.companies import CompaniesResource
from earningsfeed.resources.filings import FilingsResource
from earningsfeed.resources.insider import InsiderResource
from earningsfeed.resources.institutional import InstitutionalResource

__all__ = [
    "CompaniesResource",
    "FilingsResource",
    "InsiderResource",
    "InstitutionalResource",
]
