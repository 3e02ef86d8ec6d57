"""
本文件用于提供账户相关 API：列表、详情、按昵称查询、创建、更新、删除。
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_account_service, get_db
from app.schemas.account import AccountPayload, AccountRead
from app.services import AccountService

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=List[AccountRead])
async def get_all_accounts(
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    return await service.get_accounts(db)


@router.get("/nickname/{nickname}", response_model=AccountRead)
async def get_account_by_nickname(
    nickname: str,
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    return await service.get_account_by_nickname(db, nickname)


@router.get("/{account_id}", response_model=AccountRead)
async def get_account_by_id(
    account_id: int,
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    return await service.get_account_by_id(db, account_id)


@router.post("", response_model=AccountRead, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: AccountPayload,
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    """
    输入:
    - `payload`: 账户数据（nickname/firstName/lastName/email）

    输出:
    - 新建的账户

    作用:
    - 创建账户；昵称或邮箱重复时返回 400
    """

    return await service.save_account(db, payload)


@router.put("/{account_id}", response_model=AccountRead)
async def update_account(
    account_id: int,
    payload: AccountPayload,
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    return await service.save_account(db, payload, account_id)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: int,
    db: AsyncSession = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    """
    删除账户及其全部订单
    """
    await service.delete_account(db, account_id)
    return None
