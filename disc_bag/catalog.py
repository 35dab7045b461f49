"""
catalog.py - Fixed disc golf domain facts used across disc_bag.

Provides the recognised disc categories, the plastic lines offered by each
manufacturer and the colour palette used when rendering disc colours.

Module: disc_bag.catalog
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

# Recognised disc categories, in display order
DISC_CATEGORIES = (
    'Distance Driver',
    'Control Driver',
    'Hybrid Driver',
    'Fairway Driver',
    'Midrange',
    'Putter',
    'Approach',
)

# Used by consumers to render "X of N categories covered"
TOTAL_CATEGORIES: int = len(DISC_CATEGORIES)

_NEUTRON_LINES = [
    'Neutron',
    'Proton',
    'Electron',
    'Plasma',
    'Fission',
    'Cosmic Neutron',
    'Cosmic Electron',
    'Eclipse',
    'Total Eclipse',
]

PLASTIC_TYPES: Dict[str, List[str]] = {
    'Innova': [
        'Star', 'Champion', 'GStar', 'DX', 'Pro', 'R-Pro', 'KC Pro', 'JK Pro',
        'XT', 'Nexus', 'Luster', 'Metal Flake', 'Glow', 'Halo Star',
        'Color Glow', 'Blizzard Champion', 'Echo Star', 'Factory Second',
    ],
    'Discraft': [
        'ESP', 'Z', 'Big Z', 'Titanium', 'Jawbreaker', 'Pro-D', 'X', 'Cryztal',
        'Cryztal FLX', 'FLX', 'ESP FLX', 'Z FLX', 'Metallic Z', 'Swirl ESP',
        'Glo Z', 'Rubber Blend',
    ],
    'Dynamic Discs': [
        'Lucid', 'Fuzion', 'Prime', 'Classic', 'Lucid-X', 'Fuzion-X',
        'Lucid Air', 'Moonshine', 'Chameleon', 'Fluid',
    ],
    'Latitude64': [
        'Opto', 'Gold', 'Retro', 'Zero', 'Opto-X', 'Gold-X', 'Opto Air',
        'Frost', 'Moonshine', 'Opto Glimmer', 'Royal', 'Grand',
    ],
    'Westside': [
        'VIP', 'Tournament', 'Origio', 'BT', 'VIP-X', 'Tournament-X',
        'VIP Air', 'Moonshine', 'Elasto',
    ],
    'MVP': list(_NEUTRON_LINES),
    'Axiom': list(_NEUTRON_LINES),
    'Streamline': [
        'Neutron', 'Proton', 'Electron', 'Plasma', 'Cosmic Neutron',
        'Cosmic Electron',
    ],
    'Thought': ['Aura', 'Ethos', 'Nerve', 'Synapse', 'Origin'],
    'Discmania': [
        'S-Line', 'C-Line', 'P-Line', 'D-Line', 'G-Line', 'Neo', 'Evolution',
        'Exo', 'Lux', 'Horizon', 'Forge', 'Vapor',
    ],
    'Kastaplast': ['K1', 'K1 Soft', 'K1 Glow', 'K2', 'K3', 'K3 Hard'],
    'Prodigy': [
        '400', '400G', '400S', '350G', '350', '300', '300 Soft', '200', '500',
        '750', '750G', 'Pro Flex',
    ],
    'Infinite Discs': [
        'I-Blend', 'S-Blend', 'C-Blend', 'D-Blend', 'G-Blend', 'Metal Flake',
        'Glow', 'Swirl S-Blend',
    ],
    'Legacy': ['Icon', 'Pinnacle', 'Excel', 'Protege', 'Gravity'],
    'Gateway': [
        'Diamond', 'Platinum', 'Suregrip', 'Eraser', 'Organic', 'Evolution',
        'Hyper Diamond',
    ],
    'DGA': ['Proline', 'SP Line', 'D-Line', 'Signature', 'Glow'],
    'Clash Discs': ['Steady', 'Hardy', 'Softy'],
    'Mint': ['Apex', 'Sublime', 'Eternal', 'Royal'],
    'TSA': ['Ethos', 'Aura', 'Nerve', 'Ethereal', 'Glow'],
    'Loft': ['Alpha-Solid', 'Beta-Solid', 'Gamma-Solid'],
    'RPM': ['Atomic', 'Cosmic', 'Strata', 'Magma'],
    'Viking': ['Storm', 'Armor', 'Ground'],
    'Yikun': ['Dragon', 'Phoenix', 'Tiger'],
    'Divergent': ['Max Grip', 'Stayput'],
}

# 'Multi' maps to 'rainbow': renderers draw a gradient instead of a flat colour
DISC_COLORS: Mapping[str, str] = MappingProxyType({
    'Red': '#E74C3C',
    'Orange': '#E67E22',
    'Yellow': '#F1C40F',
    'Green': '#2ECC71',
    'Blue': '#3498DB',
    'Purple': '#9B59B6',
    'Pink': '#E91E63',
    'White': '#ECF0F1',
    'Black': '#2C3E50',
    'Gray': '#95A5A6',
    'Multi': 'rainbow',
})


def get_plastic_types(manufacturer: str) -> List[str]:
    """
    Get the plastic lines offered by a manufacturer.

    Tries an exact match first, then a case-insensitive one.

    Args:
        manufacturer (str): Manufacturer name, e.g. 'Innova'.

    Returns:
        List[str]: Plastic names, or an empty list for unknown manufacturers.
    """
    if manufacturer in PLASTIC_TYPES:
        return list(PLASTIC_TYPES[manufacturer])

    lower_manufacturer = manufacturer.lower()
    for name, plastics in PLASTIC_TYPES.items():
        if name.lower() == lower_manufacturer:
            return list(plastics)

    return []


def get_disc_color_hex(color: str) -> Optional[str]:
    """Hex value for a disc colour name, or None if the colour is not in the palette."""
    return DISC_COLORS.get(color)
