"""
Seed the store catalog with the default profile frames and chat bubbles.
Safe to run repeatedly: items are matched by name.
"""
import asyncio

from economy.core.config import get_settings
from economy.core.container import ApplicationContainer
from economy.modules.catalog import CatalogItemInput, ItemType, Rarity, SqlCatalog


def frame(name, description, price, rarity, css_class):
    return CatalogItemInput(
        name=name,
        description=description,
        price=price,
        type=ItemType.FRAME,
        rarity=rarity,
        attributes={"cssClass": css_class},
    )


def bubble(name, description, price, rarity, css_class):
    return CatalogItemInput(
        name=name,
        description=description,
        price=price,
        type=ItemType.BUBBLE,
        rarity=rarity,
        attributes={"cssClass": css_class},
    )


DEFAULT_ITEMS = [
    frame("Zinc Frame", "A simple, sturdy frame for beginners.", 10, Rarity.COMMON, "frame-common"),
    frame("Neon Blue", "A glowing blue frame that stands out.", 50, Rarity.RARE, "frame-rare"),
    frame("Royal Purple", "An elegant purple aura for distinguished authors.", 150, Rarity.EPIC, "frame-epic"),
    frame(
        "Golden Shimmer",
        "A legendary golden frame that shimmers with success.",
        500,
        Rarity.LEGENDARY,
        "frame-legendary",
    ),
    frame("Cosmic Void", "A super beautiful, animated cosmic frame.", 1000, Rarity.COSMIC, "frame-cosmic"),
    frame("Neon Pulse", "A vibrant, pulsing neon frame for the cyber-enhanced.", 1000, Rarity.EPIC, "frame-epic"),
    frame(
        "Autumn Breeze",
        "Leaves falling gently in the wind. Swirls when you hover!",
        2500,
        Rarity.AUTUMN_LEAVES,
        "frame-autumn",
    ),
    frame(
        "Sakura Breeze",
        "Gentle cherry blossom petals drifting in the wind. Reacts to your presence.",
        2500,
        Rarity.SAKURA_BREEZE,
        "frame-sakura",
    ),
    frame(
        "Electric Aura",
        "A high-voltage field of pure energy that surrounds your avatar.",
        2500,
        Rarity.ELECTRIC,
        "electric-frame",
    ),
    frame(
        "Electric Blue",
        "A high-voltage field of pure blue energy.",
        3000,
        Rarity.ELECTRIC_BLUE,
        "electric-frame-blue",
    ),
    frame(
        "Dragon Breath",
        "A legendary frame forged in dragon fire. Features a rotating dragon spirit.",
        5000,
        Rarity.DRAGON,
        "frame-dragon",
    ),
    frame(
        "Neon Party",
        "A vibrant celebration of cyan, magenta, and blue. Let the colors dance!",
        5000,
        Rarity.NEON_BURST,
        "frame-neon",
    ),
    frame(
        "Event Horizon",
        "A singularity that bends light and time. Features a dynamic particle simulation.",
        5000,
        Rarity.BLACK_HOLE,
        "frame-blackhole",
    ),
    frame(
        "Mystic Burst",
        "A magical explosion of colors and shapes. Bursting with energy!",
        6000,
        Rarity.MAGIC_BURST,
        "frame-magic",
    ),
    frame(
        "Liquid Soul",
        "A mesmerizing liquid distortion effect. Your avatar flows like water.",
        7000,
        Rarity.WATER_DISTORTION,
        "frame-water",
    ),
    frame(
        "Grok's Horizon",
        "A mysterious gravitational anomaly. It reveals its true form when you get close.",
        8000,
        Rarity.GROK_BLACK_HOLE,
        "frame-grok",
    ),
    bubble("Sunny Day", "A bright and cheerful bubble with a sun and cloud.", 2000, Rarity.RARE, "bubble-sky"),
    bubble(
        "Snowy Whisper",
        "A chilly breeze carries your words with falling snowflakes.",
        2500,
        Rarity.RARE,
        "bubble-snow",
    ),
    bubble("Spooky Message", "Boo! A haunted bubble for the brave.", 3000, Rarity.EPIC, "bubble-halloween"),
    bubble("Floral Symphony", "A flashy burst of spring flowers.", 3500, Rarity.RARE, "bubble-spring"),
    bubble("Sakura Bloom", "Pixelated cherry blossoms for a retro aesthetic.", 4500, Rarity.EPIC, "bubble-sakura"),
    bubble("Starry Night", "Send your messages written in the stars.", 5000, Rarity.LEGENDARY, "bubble-starry"),
]


async def seed_catalog():
    """Create the default items that are not in the catalog yet."""
    container = ApplicationContainer.from_settings(get_settings())
    await container.startup()

    try:
        async with container.database.transaction() as session:
            catalog = SqlCatalog.with_session(session)
            for payload in DEFAULT_ITEMS:
                item, created = await catalog.ensure_item(payload)
                state = "created" if created else "exists"
                print(
                    f"{state:>7}  {item.type.value:<7} {item.name:<16} "
                    f"{item.rarity.value:<16} {item.price:>5}  id={item.id}"
                )
    finally:
        await container.shutdown()


if __name__ == "__main__":
    asyncio.run(seed_catalog())
