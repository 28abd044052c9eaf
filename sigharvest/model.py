"""Records shared by the storage layer and the API responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from Crypto.Hash import keccak


def keccak256_hex(text: str) -> str:
    """Return the lowercase hex Keccak-256 digest of ``text`` encoded as UTF-8."""
    digest = keccak.new(digest_bits=256)
    digest.update(text.encode("utf-8"))
    return digest.hexdigest()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"invalid timestamp: {value!r}") from exc
    else:
        raise ValueError(f"invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _format_datetime(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


class SignatureKind(str, enum.Enum):
    """The kind of interface a signature describes."""

    FUNCTION = "function"
    EVENT = "event"
    ERROR = "error"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    RECEIVE = "receive"

    @classmethod
    def parse(cls, text: str) -> "SignatureKind":
        """Parse a kind name case-insensitively; raise ValueError if unknown."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown signature kind: {text!r}") from None


@dataclass
class GithubCrawlerMetadata:
    id: int
    last_user_check: datetime
    last_repository_check: datetime
    last_repository_search: datetime


@dataclass
class GithubUserDatabase:
    id: int
    login: str
    html_url: str
    is_deleted: bool
    added_at: datetime
    visited_at: Optional[datetime] = None


@dataclass
class GithubUser:
    id: int
    login: str
    html_url: str
    # Not every API response carries this value.
    public_repos: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GithubUser":
        """Build a user from a decoded API response."""
        return cls(
            id=int(_require(data, "id")),
            login=str(_require(data, "login")),
            html_url=str(_require(data, "html_url")),
            public_repos=data.get("public_repos"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "login": self.login,
            "html_url": self.html_url,
            "public_repos": self.public_repos,
        }

    def to_insertable(self) -> GithubUserDatabase:
        """Return a fresh, unvisited database row for this user."""
        return GithubUserDatabase(
            id=self.id,
            login=self.login,
            html_url=self.html_url,
            is_deleted=False,
            added_at=_utcnow(),
            visited_at=None,
        )


@dataclass
class GithubRepositoryDatabase:
    id: int
    owner_id: int
    name: str
    html_url: str
    language: Optional[str]
    stargazers_count: int
    size: int
    fork: bool
    created_at: datetime
    pushed_at: datetime
    updated_at: datetime
    scraped_at: Optional[datetime]
    visited_at: Optional[datetime]
    added_at: datetime
    solidity_ratio: Optional[float]
    is_deleted: bool
    found_by_crawling: bool


@dataclass
class GithubRepository:
    id: int
    name: str
    html_url: str
    language: Optional[str]
    stargazers_count: int
    size: int
    fork: bool
    created_at: datetime
    pushed_at: datetime
    updated_at: datetime
    owner: GithubUser
    fork_parent: Optional["GithubRepository"] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GithubRepository":
        """Build a repository from a decoded API response; the parent is under ``source``."""
        parent = data.get("source")
        return cls(
            id=int(_require(data, "id")),
            name=str(_require(data, "name")),
            html_url=str(_require(data, "html_url")),
            language=data.get("language"),
            stargazers_count=int(_require(data, "stargazers_count")),
            size=int(_require(data, "size")),
            fork=bool(_require(data, "fork")),
            created_at=_parse_datetime(_require(data, "created_at")),
            pushed_at=_parse_datetime(_require(data, "pushed_at")),
            updated_at=_parse_datetime(_require(data, "updated_at")),
            owner=GithubUser.from_dict(_require(data, "owner")),
            fork_parent=cls.from_dict(parent) if parent is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "html_url": self.html_url,
            "language": self.language,
            "stargazers_count": self.stargazers_count,
            "size": self.size,
            "fork": self.fork,
            "source": self.fork_parent.to_dict() if self.fork_parent else None,
            "created_at": _format_datetime(self.created_at),
            "pushed_at": _format_datetime(self.pushed_at),
            "updated_at": _format_datetime(self.updated_at),
            "owner": self.owner.to_dict(),
        }

    def to_insertable(
        self, solidity_ratio: Optional[float], by_crawling: bool
    ) -> GithubRepositoryDatabase:
        """Return a fresh database row; visit and scrape times start unset."""
        return GithubRepositoryDatabase(
            id=self.id,
            owner_id=self.owner.id,
            name=self.name,
            html_url=self.html_url,
            language=self.language,
            stargazers_count=self.stargazers_count,
            size=self.size,
            fork=self.fork,
            created_at=self.created_at,
            pushed_at=self.pushed_at,
            updated_at=self.updated_at,
            scraped_at=None,
            visited_at=None,
            added_at=_utcnow(),
            solidity_ratio=solidity_ratio,
            is_deleted=False,
            found_by_crawling=by_crawling,
        )


@dataclass
class EtherscanContractInsert:
    address: str
    name: str
    compiler: str
    compiler_version: str
    url: str
    added_at: datetime


@dataclass
class EtherscanContract:
    id: int
    address: str
    name: str
    compiler: str
    compiler_version: str
    url: str
    scraped_at: Optional[datetime]
    added_at: datetime

    def to_insertable(self) -> EtherscanContractInsert:
        return EtherscanContractInsert(
            address=self.address,
            name=self.name,
            compiler=self.compiler,
            compiler_version=self.compiler_version,
            url=self.url,
            added_at=self.added_at,
        )


@dataclass
class Signature:
    id: int
    text: str
    hash: str
    is_valid: bool
    added_at: datetime


@dataclass
class SignatureInsert:
    text: str
    hash: str
    is_valid: bool
    added_at: datetime


@dataclass(frozen=True)
class SignatureWithMetadata:
    """A canonical signature such as ``balanceOf(address)`` with its hash and kind.

    ``is_valid`` is false when a parameter has a user defined type.
    """

    text: str
    hash: str
    kind: SignatureKind
    is_valid: bool

    @classmethod
    def from_text(
        cls, text: str, kind: SignatureKind, is_valid: bool
    ) -> "SignatureWithMetadata":
        return cls(text=text, hash=keccak256_hex(text), kind=kind, is_valid=is_valid)

    def to_insertable(self) -> SignatureInsert:
        return SignatureInsert(
            text=self.text,
            hash=self.hash,
            is_valid=self.is_valid,
            added_at=_utcnow(),
        )


@dataclass
class MappingSignatureGithub:
    signature_id: int
    repository_id: int
    kind: SignatureKind
    added_at: datetime = field(default_factory=_utcnow)


@dataclass
class MappingSignatureEtherscan:
    signature_id: int
    contract_id: int
    kind: SignatureKind
    added_at: datetime = field(default_factory=_utcnow)


@dataclass
class MappingSignatureFourbyte:
    signature_id: int
    kind: SignatureKind
    added_at: datetime = field(default_factory=_utcnow)


@dataclass
class MappingSignatureKind:
    signature_id: int
    kind: SignatureKind


@dataclass
class ViewSignatureInsertRate:
    date: date
    count: int


@dataclass
class ViewSignaturesPopularOnGithub:
    text: str
    count: int


@dataclass
class ViewSignatureCountStatistics:
    signature_count: int
    signature_count_github: int
    signature_count_etherscan: int
    signature_count_fourbyte: int
    average_daily_signature_insert_rate_last_week: int
    # Unset during the first week.
    average_daily_signature_insert_rate_week_before_last: Optional[int] = None


@dataclass
class ViewSignatureKindDistribution:
    kind: str
    count: int