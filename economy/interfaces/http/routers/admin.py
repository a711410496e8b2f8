"""Administrative endpoints for opening accounts and granting balance."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from economy.core.security import get_current_admin
from economy.infrastructure.database.session import Database
from economy.interfaces.http.deps import get_database
from economy.modules.ledger import LedgerService
from economy.schemas import AccountCreate, AccountResponse, CreditRequest, TokenData

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/accounts", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def open_account(
    payload: AccountCreate,
    admin: TokenData = Depends(get_current_admin),
    database: Database = Depends(get_database),
) -> AccountResponse:
    async with database.transaction() as session:
        account = await LedgerService.with_session(session).open_account(
            payload.account_id, payload.initial_balance
        )
    return AccountResponse.model_validate(account)


@router.get("/accounts/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str,
    admin: TokenData = Depends(get_current_admin),
    database: Database = Depends(get_database),
) -> AccountResponse:
    async with database.transaction() as session:
        account = await LedgerService.with_session(session).get_account(account_id)
    return AccountResponse.model_validate(account)


@router.post("/accounts/{account_id}/credit", response_model=AccountResponse)
async def credit_account(
    account_id: str,
    payload: CreditRequest,
    admin: TokenData = Depends(get_current_admin),
    database: Database = Depends(get_database),
) -> AccountResponse:
    async with database.transaction() as session:
        ledger = LedgerService.with_session(session)
        await ledger.credit(account_id, payload.amount)
        account = await ledger.get_account(account_id)
    logger.info("Admin %s credited %s to account %s", admin.account_id, payload.amount, account_id)
    return AccountResponse.model_validate(account)
