"""Default vocabularies used by suggestions and catalog labels."""

from typing import Dict, List


POPULAR_SEARCHES: List[str] = [
    "薰衣草", "薄荷", "茶樹", "乳香", "檸檬",
    "尤加利", "迷迭香", "甜橙", "佛手柑", "天竺葵",
    "放鬆", "舒緩", "提神", "淨化", "平衡",
]

# Category key -> keywords that hint at that category
CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "single-oils": ["單方", "純精油", "基礎精油"],
    "proprietary-blends": ["複方", "調和", "混合"],
    "onguard": ["保衛", "防護", "免疫"],
    "deep-blue": ["舒緩", "深藍", "運動"],
    "breathe": ["呼吸", "順暢", "清新"],
    "food": ["食用", "料理", "調味"],
}

CATEGORY_LABELS: Dict[str, str] = {
    "single-oils": "單方精油",
    "proprietary-blends": "複方精油",
    "skincare": "護膚產品",
    "wellness": "健康產品",
    "supplements": "營養補充",
    "accessories": "配件用品",
    "breathe-collection": "Breathe 系列",
    "onguard-collection": "OnGuard 系列",
    "deep-blue-collection": "Deep Blue 系列",
}

COLLECTION_LABELS: Dict[str, str] = {
    "breathe-collection": "Breathe 系列",
    "onguard-collection": "OnGuard 系列",
    "deep-blue-collection": "Deep Blue 系列",
    "serenity-collection": "Serenity 系列",
    "citrus-collection": "柑橘系列",
    "floral-collection": "花香系列",
    "woody-collection": "木質系列",
    "herbal-collection": "草本系列",
    "spice-collection": "香料系列",
}
