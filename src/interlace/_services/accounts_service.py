from typing import Any, Dict, List, Optional

from .._utils import Endpoint, RequestSpec
from .._utils.constants import ACCOUNT_NOT_FOUND_CODE
from ..models import (
    AccountData,
    AccountListData,
    AccountRegisterRequest,
    AccountStatus,
    ApiResponse,
)
from ..models.errors import APIError, DecodingError
from ._base_service import BaseService

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class AccountsService(BaseService):
    """Service for registering and listing Interlace accounts."""

    def register(self, request: AccountRegisterRequest) -> AccountData:
        """Register a new account.

        Args:
            request (AccountRegisterRequest): Phone, email and name of the account holder.

        Returns:
            AccountData: The created account.

        Raises:
            APIError: If the API rejects the registration (e.g. duplicate phone).

        Examples:
            ```python
            from interlace import Interlace
            from interlace.models import AccountRegisterRequest

            client = Interlace(access_token="...")

            account = client.accounts.register(
                AccountRegisterRequest(
                    phone_country_code="86",
                    phone_number="15900000031",
                    email="user@example.com",
                    name="test",
                )
            )
            ```
        """
        response = self.request(self._register_spec(request), ApiResponse[AccountData])
        return self._unwrap_required(response)

    async def register_async(self, request: AccountRegisterRequest) -> AccountData:
        """Asynchronously register a new account."""
        response = await self.request_async(
            self._register_spec(request), ApiResponse[AccountData]
        )
        return self._unwrap_required(response)

    def register_with_details(
        self, phone_country_code: str, phone_number: str, email: str, name: str
    ) -> AccountData:
        return self.register(
            AccountRegisterRequest(
                phone_country_code=phone_country_code,
                phone_number=phone_number,
                email=email,
                name=name,
            )
        )

    def list(
        self,
        *,
        account_id: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        page: int = 1,
        status: Optional[str] = None,
        type: Optional[int] = None,
    ) -> AccountListData:
        """List accounts, one page at a time.

        Args:
            account_id: Only return the account with this id.
            limit: Page size, capped at 100. Non-positive values use the default of 10.
            page: 1-based page number.
            status: Filter by account status (see AccountStatus).
            type: Filter by account type (see AccountType).

        Returns:
            AccountListData: The page of accounts and the total count.
        """
        spec = self._list_spec(
            account_id=account_id, limit=limit, page=page, status=status, type=type
        )
        response = self.request(spec, ApiResponse[AccountListData])
        return self._unwrap(response) or AccountListData()

    async def list_async(
        self,
        *,
        account_id: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        page: int = 1,
        status: Optional[str] = None,
        type: Optional[int] = None,
    ) -> AccountListData:
        """Asynchronously list accounts, one page at a time."""
        spec = self._list_spec(
            account_id=account_id, limit=limit, page=page, status=status, type=type
        )
        response = await self.request_async(spec, ApiResponse[AccountListData])
        return self._unwrap(response) or AccountListData()

    def retrieve(self, account_id: str) -> AccountData:
        """Retrieve a single account by id.

        Raises:
            ValueError: If ``account_id`` is empty.
            APIError: With code ``ACCOUNT_NOT_FOUND`` when no account matches.
        """
        self._require_account_id(account_id)
        page = self.list(account_id=account_id, limit=1, page=1)
        return self._first_or_raise(page, account_id)

    async def retrieve_async(self, account_id: str) -> AccountData:
        self._require_account_id(account_id)
        page = await self.list_async(account_id=account_id, limit=1, page=1)
        return self._first_or_raise(page, account_id)

    def list_all(
        self,
        *,
        account_id: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[int] = None,
    ) -> List[AccountData]:
        """Fetch every page of accounts matching the filters.

        Pages of 100 are requested until a short page is returned.
        """
        accounts: List[AccountData] = []
        page = 1
        while True:
            result = self.list(
                account_id=account_id,
                limit=MAX_PAGE_SIZE,
                page=page,
                status=status,
                type=type,
            )
            accounts.extend(result.items)
            if len(result.items) < MAX_PAGE_SIZE:
                return accounts
            page += 1

    async def list_all_async(
        self,
        *,
        account_id: Optional[str] = None,
        status: Optional[str] = None,
        type: Optional[int] = None,
    ) -> List[AccountData]:
        accounts: List[AccountData] = []
        page = 1
        while True:
            result = await self.list_async(
                account_id=account_id,
                limit=MAX_PAGE_SIZE,
                page=page,
                status=status,
                type=type,
            )
            accounts.extend(result.items)
            if len(result.items) < MAX_PAGE_SIZE:
                return accounts
            page += 1

    def list_by_status(self, status: str) -> List[AccountData]:
        return self.list(status=status, limit=MAX_PAGE_SIZE).items

    def list_active(self) -> List[AccountData]:
        return self.list_by_status(AccountStatus.ACTIVE)

    def list_inactive(self) -> List[AccountData]:
        return self.list_by_status(AccountStatus.INACTIVE)

    def list_by_type(self, account_type: int) -> List[AccountData]:
        return self.list(type=account_type, limit=MAX_PAGE_SIZE).items

    def count(self) -> int:
        """Return the total number of accounts reported by the API."""
        result = self.list(limit=1, page=1)
        try:
            return int(result.total)
        except ValueError as e:
            raise DecodingError(f"Failed to parse total count: {result.total!r}") from e

    def _require_account_id(self, account_id: str) -> None:
        if not account_id:
            raise ValueError("account_id is required")

    def _first_or_raise(self, page: AccountListData, account_id: str) -> AccountData:
        if not page.items:
            raise APIError(
                ACCOUNT_NOT_FOUND_CODE, f"Account with ID {account_id} not found"
            )
        return page.items[0]

    def _register_spec(self, request: AccountRegisterRequest) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint.api("accounts/register"),
            json=request,
        )

    def _list_spec(
        self,
        *,
        account_id: Optional[str],
        limit: int,
        page: int,
        status: Optional[str],
        type: Optional[int],
    ) -> RequestSpec:
        if limit <= 0:
            limit = DEFAULT_PAGE_SIZE
        params: Dict[str, Any] = {}
        if account_id:
            params["accountId"] = account_id
        params["limit"] = str(min(limit, MAX_PAGE_SIZE))
        params["page"] = str(page if page > 0 else 1)
        if status:
            params["status"] = status
        if type:
            params["type"] = str(int(type))

        return RequestSpec(
            method="GET",
            endpoint=Endpoint.api("accounts"),
            params=params,
        )
