"""Demo script for the imgflip clients.

Captioning runs only when IMGFLIP_USERNAME and IMGFLIP_PASSWORD are set in the
environment or a .env file.
"""

import asyncio

from core import load_settings, setup_logging
from imgflip import (
    CaptionBoxBuilder,
    CaptionBoxesRequestBuilder,
    ImgflipAccountClient,
    ImgflipClient,
    ImgflipError,
)


async def demo_imgflip_client():
    """Demonstrate listing and captioning templates."""
    settings = load_settings()
    setup_logging(level=settings.log_level)

    print("🚀 Imgflip Client Demo")
    print("=" * 50)

    async with ImgflipClient.from_settings(settings) as client:
        try:
            templates = await client.list_templates()
        except ImgflipError as e:
            print(f"❌ Error listing templates: {e}")
            return

    print(f"✅ Fetched {len(templates)} templates")
    for template in templates[:5]:
        print(f"  {template.id:>10}  {template.name} ({template.box_count} boxes)")

    if not settings.has_credentials or not templates:
        print("\nℹ️  Set IMGFLIP_USERNAME and IMGFLIP_PASSWORD to try captioning")
        return

    template = templates[0]
    builder = CaptionBoxesRequestBuilder(template.id)
    for i in range(template.box_count):
        builder.caption_box(CaptionBoxBuilder(f"box {i + 1}").build())

    async with ImgflipAccountClient.from_settings(settings) as account_client:
        try:
            result = await account_client.caption_image(builder.build())
            print(f"\n🖼️  {result.url}")
            print(f"🔗 {result.page_url}")
        except ImgflipError as e:
            print(f"❌ Error captioning {template.name}: {e}")


if __name__ == "__main__":
    asyncio.run(demo_imgflip_client())
