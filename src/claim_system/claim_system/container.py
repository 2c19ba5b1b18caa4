from __future__ import annotations

from dataclasses import dataclass

from .claims.mysql_claim_repository import MySQLClaimRepository
from .claims.repository import ClaimRepository
from .claims.service import ClaimService
from .database.connection import DBConfig, DatabaseConnection
from .documents.local_store import LocalDocumentStore
from .documents.store import DocumentStore
from .reporting.service import ReportingService
from .users.auth import AuthProvider, SessionAuthProvider
from .users.mysql_user_directory import MySQLUserDirectory
from .users.repository import UserDirectory


@dataclass(frozen=True)
class Container:
    claims_repo: ClaimRepository
    users_repo: UserDirectory
    document_store: DocumentStore
    auth_provider: AuthProvider

    claim_service: ClaimService
    reporting_service: ReportingService


def build_services(
    *,
    claims_repo: ClaimRepository,
    users_repo: UserDirectory,
    document_store: DocumentStore,
    auth_provider: AuthProvider,
) -> Container:
    return Container(
        claims_repo=claims_repo,
        users_repo=users_repo,
        document_store=document_store,
        auth_provider=auth_provider,
        claim_service=ClaimService(claims_repo, users_repo, document_store),
        reporting_service=ReportingService(claims_repo, users_repo),
    )


def build_container(*, db_config: dict, upload_dir: str) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        claims_repo=MySQLClaimRepository(conn),
        users_repo=MySQLUserDirectory(conn),
        document_store=LocalDocumentStore(upload_dir),
        auth_provider=SessionAuthProvider(),
    )
