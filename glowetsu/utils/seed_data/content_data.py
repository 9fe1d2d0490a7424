import copy
from typing import Any, Dict


from glowetsu.collections.enums import ContentType


ABOUT_US_DATA = {
    "hero_title": "About glowetsu",
    "hero_subtitle": "Creating unforgettable memories through authentic travel experiences since 2008",
    "story_title": "Our Story",
    "story_paragraphs": [
        "Founded in 2008 by a group of passionate travelers, glowetsu was born from a simple belief: travel should transform lives, not just provide vacations.",
        "We started as a small team organizing adventure trips for friends and family. Word spread quickly about our attention to detail, authentic experiences, and commitment to sustainable tourism.",
        "Today, we're proud to have guided over 50,000 travelers to more than 120 destinations worldwide, while maintaining our core values of authenticity, sustainability, and creating meaningful connections between travelers and local communities.",
    ],
    "story_image": "https://images.pexels.com/photos/1591373/pexels-photo-1591373.jpeg?auto=compress&cs=tinysrgb&w=600",
    "team_members": [
        {
            "name": "Sarah Johnson",
            "role": "Founder & CEO",
            "image": "https://images.pexels.com/photos/774909/pexels-photo-774909.jpeg?auto=compress&cs=tinysrgb&w=300",
            "description": "Passionate traveler with 20 years in the tourism industry",
            "order": 0,
            "is_active": True,
        },
    ],
}


CAROUSEL_DATA = {
    "slides": [
        {
            "image": "https://images.pexels.com/photos/1591373/pexels-photo-1591373.jpeg?auto=compress&cs=tinysrgb&w=1200",
            "title": "Discover Amazing Destinations",
            "subtitle": "Experience the world like never before with our curated travel packages",
            "button_text": "Explore Tours",
            "button_link": "/tours",
            "order": 0,
            "is_active": True,
        },
    ],
}


WHY_CHOOSE_US_DATA = {
    "main_title": "Why Choose glowetsu?",
    "main_description": "With over 15 years of experience in creating unforgettable travel experiences, we specialize in crafting personalized tours that connect you with the heart and soul of each destination.",
    "image": "https://images.pexels.com/photos/1010657/pexels-photo-1010657.jpeg?auto=compress&cs=tinysrgb&w=600",
    "features": [
        {
            "icon": "Users",
            "title": "Expert Local Guides",
            "description": "Our passionate local guides share insider knowledge and hidden gems",
            "order": 0,
            "is_active": True,
        },
        {
            "icon": "Star",
            "title": "Premium Quality",
            "description": "Carefully selected accommodations and transportation for your comfort",
            "order": 1,
            "is_active": True,
        },
        {
            "icon": "MapPin",
            "title": "Unique Destinations",
            "description": "From popular attractions to off-the-beaten-path adventures",
            "order": 2,
            "is_active": True,
        },
    ],
}


CONTENT_DEFAULTS = {
    ContentType.ABOUT_US: ABOUT_US_DATA,
    ContentType.CAROUSEL: CAROUSEL_DATA,
    ContentType.WHY_CHOOSE_US: WHY_CHOOSE_US_DATA,
}


def get_default_content(content_type: ContentType) -> Dict[str, Any]:
    """
    Return a fresh copy of the default content for a section.

    Args:
        content_type: Content section to look up

    Returns:
        Deep copy of the default data, safe to mutate
    """
    return copy.deepcopy(CONTENT_DEFAULTS[content_type])
