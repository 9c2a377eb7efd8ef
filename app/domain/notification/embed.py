from datetime import datetime, timezone

from app.core.config import settings
from app.domain.notification.schemas import Embed, EmbedField, EmbedFooter, Repository


def build_embed(
    message: str,
    repository: Repository,
    compare_url: str,
    hide_links: bool = False,
) -> Embed:
    """최종 메시지를 채팅 임베드로 감싸기

    hide_links가 True면 fields를 만들지 않는다.
    """
    embed = Embed(
        color=settings.embed_color,
        description=message,
        timestamp=datetime.now(timezone.utc).isoformat(),
        footer=EmbedFooter(
            text=settings.embed_footer_text,
            icon_url=settings.embed_footer_icon_url,
        ),
    )

    if not hide_links:
        embed.fields = [
            EmbedField(
                name="Repository",
                value=f"[{repository.full_name}]({repository.html_url})",
                inline=True,
            ),
            EmbedField(name="View Changes", value=f"[Compare]({compare_url})", inline=True),
        ]

    return embed
