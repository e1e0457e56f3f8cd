from fastapi import APIRouter, Depends, status

from kontent_dashboard.api.dependencies import get_context
from kontent_dashboard.api.schemas import UserInvite, UserUpdate
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core import users as user_ops
from kontent_dashboard.models import SubscriptionUser

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[SubscriptionUser])
async def users(ctx: DashboardContext = Depends(get_context)) -> list[SubscriptionUser]:
    return await user_ops.list_users(ctx.subscription)


@router.get("/{user_id}", response_model=SubscriptionUser)
async def user(user_id: str, ctx: DashboardContext = Depends(get_context)) -> SubscriptionUser:
    return await user_ops.get_user(ctx.subscription, user_id)


@router.post("", response_model=SubscriptionUser, status_code=status.HTTP_201_CREATED)
async def invite(body: UserInvite, ctx: DashboardContext = Depends(get_context)) -> SubscriptionUser:
    return await user_ops.invite_user(ctx.subscription, body.model_dump())


@router.put("/{user_id}", response_model=SubscriptionUser)
async def update(user_id: str, body: UserUpdate, ctx: DashboardContext = Depends(get_context)) -> SubscriptionUser:
    return await user_ops.update_user(ctx.subscription, user_id, body.model_dump())
