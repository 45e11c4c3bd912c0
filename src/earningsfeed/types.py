"""
Typed records for Earnings Feed API responses.

Every record is a frozen dataclass built from the server's JSON payload with
`from_dict()`. Wire keys are camelCase; attributes are their snake_case
equivalents. Values are taken as-is (no coercion, no validation) and the
untouched payload is kept on `raw`, so fields the client does not model are
still available and `to_dict()` gives back exactly what the server sent.
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable, ClassVar, Generic, Iterator, TypeVar

T = TypeVar("T")
R = TypeVar("R", bound="Record")

_CAMEL_BOUNDARY = re.compile(r"_([a-z0-9])")


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key."""
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


class Record:
    """Shared behaviour for payload-backed records.

    Subclasses may declare:
        _ALIASES: attribute name -> wire key, where to_camel() is not enough.
        _NESTED: attribute name -> (record class, is_list).
    """

    _ALIASES: ClassVar[dict[str, str]] = {}
    _NESTED: ClassVar[dict[str, tuple[type[Record], bool]]] = {}

    raw: dict[str, Any]

    @classmethod
    def from_dict(cls: type[R], data: dict[str, Any]) -> R:
        """Build a record from a JSON object."""
        kwargs: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if f.name == "raw":
                continue
            key = cls._ALIASES.get(f.name) or to_camel(f.name)
            value = data.get(key)

            nested = cls._NESTED.get(f.name)
            if nested is not None:
                record_cls, many = nested
                if many:
                    value = tuple(record_cls.from_dict(v) for v in value or ())
                elif value is not None:
                    value = record_cls.from_dict(value)

            kwargs[f.name] = value
        return cls(raw=data, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the payload this record was built from."""
        return copy.deepcopy(self.raw)

    def __getitem__(self, key: str) -> Any:
        """Access any wire field by its camelCase key."""
        return self.raw[key]


# ============================================================================
# Filing Types
# ============================================================================


@dataclass(frozen=True)
class FilingCompany(Record):
    """Company details attached to a filing."""

    cik: int
    name: str
    state_of_incorporation: str | None = None
    state_of_incorporation_description: str | None = None
    fiscal_year_end: str | None = None  # MMDD
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class Filing(Record):
    """SEC filing from the filings feed."""

    _NESTED: ClassVar[dict[str, tuple[type[Record], bool]]] = {
        "company": (FilingCompany, False),
    }

    accession_number: str
    cik: int
    form_type: str  # 10-K, 8-K, etc.
    filed_at: str
    provisional: bool
    size_bytes: int
    url: str
    title: str
    status: str
    updated_at: str
    sorted_at: str
    accession_no_dashes: str | None = None
    company_name: str | None = None
    accept_ts: str | None = None
    feed_day: str | None = None  # YYYY-MM-DD
    primary_ticker: str | None = None
    primary_exchange: str | None = None
    company: FilingCompany | None = None
    logo_url: str | None = None
    entity_class: str | None = None  # "company" or "person"
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class FilingDocument(Record):
    """Document within a filing."""

    seq: int
    filename: str
    doc_type: str
    is_primary: bool
    description: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class FilingRole(Record):
    """Entity role in a filing (filer, issuer, reporting-owner, ...)."""

    cik: int
    role: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class FilingDetail(Record):
    """Detailed filing information, including documents and roles."""

    _NESTED: ClassVar[dict[str, tuple[type[Record], bool]]] = {
        "company": (FilingCompany, False),
        "documents": (FilingDocument, True),
        "roles": (FilingRole, True),
    }

    accession_number: str
    cik: int
    form_type: str
    filed_at: str
    provisional: bool
    title: str
    url: str
    size_bytes: int
    accession_no_dashes: str | None = None
    accept_ts: str | None = None
    feed_day: str | None = None
    sec_relative_dir: str | None = None
    company_name: str | None = None
    primary_ticker: str | None = None
    company: FilingCompany | None = None
    documents: tuple[FilingDocument, ...] = ()
    roles: tuple[FilingRole, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


# ============================================================================
# Insider Transaction Types
# ============================================================================


@dataclass(frozen=True)
class InsiderTransaction(Record):
    """Insider transaction from Form 3/4/5."""

    accession_number: str
    filed_at: str
    form_type: str
    person_cik: int
    person_name: str
    company_cik: int
    is_director: bool
    is_officer: bool
    is_ten_percent_owner: bool
    is_other: bool
    security_title: str
    is_derivative: bool
    transaction_date: str
    transaction_code: str  # P, S, A, M, G, ...
    equity_swap_involved: bool
    acquired_disposed: str  # "A" or "D"
    direct_indirect: str  # "D" or "I"
    company_name: str | None = None
    ticker: str | None = None
    officer_title: str | None = None
    shares: float | None = None
    price_per_share: float | None = None
    shares_after: float | None = None
    ownership_nature: str | None = None
    conversion_or_exercise_price: float | None = None
    exercise_date: str | None = None
    expiration_date: str | None = None
    underlying_security_title: str | None = None
    underlying_shares: float | None = None
    transaction_value: float | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


# ============================================================================
# Institutional Holdings Types
# ============================================================================


@dataclass(frozen=True)
class InstitutionalHolding(Record):
    """Institutional holding from a 13F filing."""

    cusip: str
    issuer_name: str
    class_title: str
    value: float  # USD
    shares: float
    shares_type: str  # "SH" or "PRN"
    investment_discretion: str  # "SOLE", "DFND" or "OTHER"
    manager_cik: int
    manager_name: str
    report_period_date: str
    filed_at: str
    accession_number: str
    company_cik: int | None = None
    ticker: str | None = None
    put_call: str | None = None
    other_manager: str | None = None
    voting_sole: float | None = None
    voting_shared: float | None = None
    voting_none: float | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


# ============================================================================
# Company Types
# ============================================================================


@dataclass(frozen=True)
class Ticker(Record):
    """Stock ticker information."""

    symbol: str
    exchange: str
    is_primary: bool
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class SicCode(Record):
    """Standard Industrial Classification code."""

    code: int
    description: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class Address(Record):
    """Company address."""

    _ALIASES: ClassVar[dict[str, str]] = {"address_type": "type"}

    address_type: str  # mailing, business
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state_or_country: str | None = None
    state_or_country_description: str | None = None
    zip_code: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class Company(Record):
    """Company profile."""

    _NESTED: ClassVar[dict[str, tuple[type[Record], bool]]] = {
        "tickers": (Ticker, True),
        "sic_codes": (SicCode, True),
        "addresses": (Address, True),
    }

    cik: int
    name: str
    has_insider_transactions: bool
    is_insider: bool
    updated_at: str
    entity_type: str | None = None
    category: str | None = None
    description: str | None = None
    tickers: tuple[Ticker, ...] = ()
    primary_ticker: str | None = None
    sic_codes: tuple[SicCode, ...] = ()
    ein: str | None = None
    fiscal_year_end: str | None = None
    state_of_incorporation: str | None = None
    state_of_incorporation_description: str | None = None
    phone: str | None = None
    website: str | None = None
    investor_website: str | None = None
    addresses: tuple[Address, ...] = ()
    logo_url: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class CompanySearchResult(Record):
    """Company search result."""

    cik: int
    name: str
    ticker: str | None = None
    exchange: str | None = None
    entity_type: str | None = None
    category: str | None = None
    sic_code: int | None = None
    sic_description: str | None = None
    logo_url: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


# ============================================================================
# Response Types
# ============================================================================


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """One page of a cursor-paginated listing.

    Items keep the server's order. `next_cursor` is opaque and must be passed
    back verbatim; it is meaningless once `has_more` is False.
    """

    items: tuple[T, ...]
    has_more: bool
    next_cursor: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        item_factory: Callable[[dict[str, Any]], T],
    ) -> PaginatedResponse[T]:
        """Build a page, converting each item with `item_factory`."""
        return cls(
            items=tuple(item_factory(item) for item in data.get("items") or ()),
            has_more=bool(data.get("hasMore", False)),
            next_cursor=data.get("nextCursor"),
            raw=data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the payload this page was built from."""
        return copy.deepcopy(self.raw)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


FilingsResponse = PaginatedResponse[Filing]
InsiderTransactionsResponse = PaginatedResponse[InsiderTransaction]
InstitutionalHoldingsResponse = PaginatedResponse[InstitutionalHolding]
CompanySearchResponse = PaginatedResponse[CompanySearchResult]
