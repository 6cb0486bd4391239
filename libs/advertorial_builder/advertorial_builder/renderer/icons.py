"""Pictos SVG inline utilisés par les renderers de blocs."""

STAR = (
    '<svg width="16" height="16" viewBox="0 0 16 16" fill="#f59e0b" xmlns="http://www.w3.org/2000/svg" '
    'style="display:inline-block;vertical-align:middle;"><path d="M8 1l1.85 3.75L14 5.5l-3 2.92.71 4.12L8 '
    '10.5l-3.71 1.95L5 8.42 2 5.5l4.15-.75L8 1z"/></svg>'
)
STARS = STAR * 5

SHIELD = (
    '<svg width="20" height="20" viewBox="0 0 20 20" fill="none" xmlns="http://www.w3.org/2000/svg" '
    'style="display:inline-block;vertical-align:middle;">'
    '<path d="M10 2L3 5v5c0 4 3.13 7.74 7 9 3.87-1.26 7-5 7-9V5l-7-3z" fill="#059669" opacity="0.15"/>'
    '<path d="M10 2L3 5v5c0 4 3.13 7.74 7 9 3.87-1.26 7-5 7-9V5l-7-3z" stroke="#059669" stroke-width="1.5" fill="none"/>'
    '<path d="M7 10l2 2 4-4" stroke="#059669" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round"/></svg>'
)

IMAGE = (
    '<svg width="32" height="32" viewBox="0 0 32 32" fill="none" xmlns="http://www.w3.org/2000/svg">'
    '<rect width="32" height="32" rx="6" fill="none"/><path d="M4 24l7-8 5 6 4-4 8 6H4z" fill="#cbd5e1"/>'
    '<circle cx="22" cy="10" r="3" fill="#cbd5e1"/></svg>'
)

# Pastilles ✓ / ✗ du comparatif et du bloc pour/contre
CHECK_BADGE = (
    '<svg width="18" height="18" viewBox="0 0 18 18" fill="none"><circle cx="9" cy="9" r="9" fill="#059669"/>'
    '<path d="M5 9l3 3 5-5" stroke="#fff" stroke-width="1.8" stroke-linecap="round" stroke-linejoin="round"/></svg>'
)
CROSS_BADGE = (
    '<svg width="18" height="18" viewBox="0 0 18 18" fill="none"><circle cx="9" cy="9" r="9" fill="#e5e7eb"/>'
    '<path d="M6 6l6 6M12 6l-6 6" stroke="#9ca3af" stroke-width="1.8" stroke-linecap="round"/></svg>'
)


def check(color: str) -> str:
    return (
        '<svg width="14" height="14" viewBox="0 0 14 14" fill="none" xmlns="http://www.w3.org/2000/svg" '
        'style="display:inline-block;vertical-align:middle;flex-shrink:0;">'
        f'<circle cx="7" cy="7" r="7" fill="{color}"/>'
        '<path d="M4 7l2 2 4-4" stroke="#fff" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round"/></svg>'
    )


def tier_check(color: str) -> str:
    return (
        f'<svg width="14" height="14" viewBox="0 0 14 14" fill="none"><circle cx="7" cy="7" r="7" fill="{color}" opacity="0.15"/>'
        f'<path d="M4 7l2 2 4-4" stroke="{color}" stroke-width="1.8" stroke-linecap="round" stroke-linejoin="round"/></svg>'
    )


def shield_outline(color: str) -> str:
    return (
        '<svg width="14" height="14" viewBox="0 0 24 24" fill="none">'
        f'<path d="M12 22s8-4 8-10V5l-8-3-8 3v7c0 6 8 10 8 10z" stroke="{color}" stroke-width="2" '
        'stroke-linecap="round" stroke-linejoin="round"/></svg>'
    )
