from typing import Annotated

import typer

from kontent_dashboard.cli import common
from kontent_dashboard.context import DashboardContext
from kontent_dashboard.core import users as user_ops
from kontent_dashboard.models import SubscriptionUser

users_app = typer.Typer(help="Manage subscription users.")


def _rows(users: list[SubscriptionUser]) -> list[tuple[str, ...]]:
    return [(u.id, u.full_name, u.email, u.status) for u in users]


@users_app.command("list")
def list_users() -> None:
    """List subscription users."""

    async def _run(ctx: DashboardContext) -> list[SubscriptionUser]:
        return await user_ops.list_users(ctx.subscription)

    common.render_table(["id", "name", "email", "status"], _rows(common.run(_run)))


@users_app.command("invite")
def invite(
    email: Annotated[str, typer.Argument(help="Email address of the new user.")],
    first_name: Annotated[str | None, typer.Option(help="First name.")] = None,
    last_name: Annotated[str | None, typer.Option(help="Last name.")] = None,
) -> None:
    """Invite a user to the subscription."""

    async def _run(ctx: DashboardContext) -> SubscriptionUser:
        return await user_ops.invite_user(
            ctx.subscription, {"email": email, "first_name": first_name, "last_name": last_name}
        )

    user = common.run(_run)
    common.console.print(f"[green]Invited[/green] {user.email} ({user.id})")
