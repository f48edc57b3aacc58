"""Dual-version user-role update service.

While the user-role schema migration is in progress every assignment
exists once per UserRoleVersion. An update is applied to V1 and then to
V2. Both steps always run, and both outcomes are returned. There is no
retry and no compensation: a half-applied update is reported, not undone.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.user_role import UserRole, UserRoleUpdate
from src.domain.enums import UserRoleVersion
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.user_role_repository import UserRoleRepository


class DualVersionOutcome(str, Enum):
    """Combined outcome of a dual-version update."""

    BOTH_SUCCEEDED = "both_succeeded"
    V1_FAILED = "v1_failed"
    V2_FAILED = "v2_failed"
    BOTH_FAILED = "both_failed"


@dataclass(frozen=True, kw_only=True)
class DualVersionUpdateResult:
    """Per-version results of a dual-version update.

    Attributes:
        v1: Result of the V1 update.
        v2: Result of the V2 update.
    """

    v1: Result[UserRole, DomainError]
    v2: Result[UserRole, DomainError]

    @property
    def outcome(self) -> DualVersionOutcome:
        """Collapse the pair into a tagged outcome."""
        match (isinstance(self.v1, Success), isinstance(self.v2, Success)):
            case (True, True):
                return DualVersionOutcome.BOTH_SUCCEEDED
            case (False, True):
                return DualVersionOutcome.V1_FAILED
            case (True, False):
                return DualVersionOutcome.V2_FAILED
            case _:
                return DualVersionOutcome.BOTH_FAILED

    @property
    def any_succeeded(self) -> bool:
        """True when at least one version was updated."""
        return self.outcome is not DualVersionOutcome.BOTH_FAILED


class UserRoleUpdateService:
    """Applies user-role updates to both schema versions."""

    def __init__(
        self,
        user_role_repo: UserRoleRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            user_role_repo: User-role assignment repository.
            logger: Structured logger.
        """
        self._user_role_repo = user_role_repo
        self._logger = logger

    async def update_v1_and_v2_user_roles(
        self,
        user_id: str,
        org_id: str,
        merchant_id: str,
        profile_id: str | None,
        update: UserRoleUpdate,
    ) -> DualVersionUpdateResult:
        """Apply an update to the V1 and V2 rows of an assignment.

        V1 is updated first, then V2. The V2 update is attempted even when
        V1 fails. Each failure is logged with its version.

        Args:
            user_id: Assigned user.
            org_id: Organization lineage component.
            merchant_id: Merchant lineage component.
            profile_id: Profile lineage component.
            update: Status or role change to apply.

        Returns:
            DualVersionUpdateResult holding both results.
        """
        results: dict[UserRoleVersion, Result[UserRole, DomainError]] = {}
        for version in (UserRoleVersion.V1, UserRoleVersion.V2):
            result = await self._user_role_repo.update_user_role_by_user_id_and_lineage(
                user_id,
                org_id,
                merchant_id,
                profile_id,
                update,
                version,
            )
            if isinstance(result, Failure):
                self._logger.error(
                    "user_role_update_failed",
                    user_id=user_id,
                    org_id=org_id,
                    merchant_id=merchant_id,
                    version=version.value,
                    error_code=result.error.code.value,
                    cause=str(result.error),
                )
            results[version] = result

        dual_result = DualVersionUpdateResult(
            v1=results[UserRoleVersion.V1],
            v2=results[UserRoleVersion.V2],
        )
        self._logger.info(
            "user_role_dual_version_update_completed",
            user_id=user_id,
            outcome=dual_result.outcome.value,
        )
        return dual_result
