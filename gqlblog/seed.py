"""Demo data: two users, five posts with filler text and two comments."""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from gqlblog.model import Comment, Post, User
from gqlblog.resolver import Resolver
from gqlblog.service import Service

_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua enim ad minim veniam "
    "quis nostrud exercitation ullamco laboris nisi aliquip ex ea commodo "
    "consequat duis aute irure in reprehenderit voluptate velit esse cillum "
    "eu fugiat nulla pariatur excepteur sint occaecat cupidatat non proident "
    "sunt culpa qui officia deserunt mollit anim id est laborum"
).split()


def _sentence(
    rng: random.Random, words_per_sentence: int, comma_chance: int
) -> str:
    words = [rng.choice(_WORDS) for _ in range(words_per_sentence)]
    words[0] = words[0].capitalize()
    if comma_chance > 0:
        words[:-1] = [
            word + "," if rng.randrange(comma_chance) == 0 else word
            for word in words[:-1]
        ]
    return " ".join(words) + "."


def generate_paragraphs(
    count: int,
    rng: random.Random | None = None,
    words_per_sentence: int = 10,
    sentences_per_paragraph: int = 5,
    comma_chance: int = 3,
) -> str:
    """Return ``count`` paragraphs of filler text separated by blank lines.

    Each word but the last in a sentence is followed by a comma with a
    chance of one in ``comma_chance``; zero disables commas.
    """
    if count < 0:
        raise ValueError("paragraph count must not be negative")
    if words_per_sentence < 1:
        raise ValueError("words per sentence must be at least 1")
    if sentences_per_paragraph < 1:
        raise ValueError("sentences per paragraph must be at least 1")
    if comma_chance < 0:
        raise ValueError("comma chance must not be negative")
    rng = rng or random.Random()
    paragraphs = (
        " ".join(
            _sentence(rng, words_per_sentence, comma_chance)
            for _ in range(sentences_per_paragraph)
        )
        for _ in range(count)
    )
    return "\n\n".join(paragraphs)


def init_users() -> Service[int, User]:
    """Return a user service holding the two demo users."""
    users: Service[int, User] = Service()
    now = datetime.now()
    users.set(
        User(
            id=1,
            name="Alice Wonderland",
            email="alice.w@example.com",
            phone_number="[phone]",
            address={
                "street": "1 Rabbit Hole",
                "city": "Wonderland City",
                "zipCode": "90210",
                "country": "Fantasy",
            },
            role="admin",
            created_at=now - timedelta(days=60),
            last_login=now,
            preferences={"theme": "dark", "notifications": True},
        )
    )
    users.set(
        User(
            id=2,
            name="Bob The Builder",
            email="bob.b@example.com",
            phone_number="[phone]",
            address={
                "street": "2 Construction Site",
                "city": "Builderville",
                "zipCode": "12345",
                "country": "Imagination",
            },
            role="editor",
            created_at=now - timedelta(days=59),
            last_login=now,
            preferences={"theme": "light", "notifications": False},
        )
    )
    return users


_POSTS = (
    (
        1,
        "New 'Hyper-Aware' Smartwatch Now Judges Your Life Choices In Real-Time",
        "Wearable tech reaches its peak with the 'MoralCompass 3000,' which not "
        "only tracks your steps but also audibly tuts when you spend too much on "
        "online impulse buys or opt for a third slice of pizza.",
        1,
        "Technology",
        30,
    ),
    (
        2,
        "Scientists Discover Evidence That Entire Universe Is Just A Toddler's "
        "Unfinished Finger Painting",
        "Groundbreaking astronomical research has revealed cosmic smudges and "
        "erratic crayon lines, leading experts to conclude that reality as we "
        "know it is merely a messy art project abandoned by an impatient "
        "celestial child.",
        1,
        "Science",
        29,
    ),
    (
        3,
        "CEO Fulfills Lifelong Dream Of Laying Off Thousands To Optimize "
        "'Synergistic Efficiencies'",
        "In a powerful display of ruthless ambition, CEO Sterling Blackwood "
        "announced mass redundancies, declaring it 'the most fulfilling moment "
        "of my career' as the company embraces a 'leaner, meaner, and "
        "infinitely more profitable' future.",
        2,
        "Business",
        28,
    ),
    (
        4,
        "Streaming Service Now Just Showing Empty Room With Faint Echo Of Old "
        "Movie Quotes",
        "In a bold move to 'revolutionize content consumption,' 'VaporView+' "
        "announced its new flagship offering: a static shot of an unfurnished "
        "room, occasionally punctuated by whispers of classic film dialogue, "
        "designed for 'maximal chill and minimal engagement'.",
        2,
        "Entertainment",
        27,
    ),
    (
        5,
        "Wellness Guru Attributes All Success To 'Standing Up Occasionally'",
        "Billionaire lifestyle coach Serenity Moonbeam credits her unparalleled "
        "vitality and financial success to the simple, yet revolutionary "
        "practice of 'not always sitting down,' sparking a global movement of "
        "cautious verticality.",
        2,
        "Health",
        26,
    ),
)


def init_posts(rng: random.Random | None = None) -> Service[int, Post]:
    """Return a post service holding the five demo posts."""
    rng = rng or random.Random()
    posts: Service[int, Post] = Service()
    now = datetime.now()
    for post_id, title, ingress, user_id, category, days_ago in _POSTS:
        posts.set(
            Post(
                id=post_id,
                user_id=user_id,
                title=title,
                ingress=ingress,
                content=generate_paragraphs(rng.randrange(5) + 1, rng),
                category=category,
                created_at=now - timedelta(days=days_ago),
            )
        )
    return posts


def init_comments() -> Service[int, Comment]:
    """Return a comment service holding the two demo comments."""
    comments: Service[int, Comment] = Service()
    now = datetime.now()
    comments.set(
        Comment(
            id=1,
            post_id=1,
            user_id=2,
            content="I bought this watch, and the first thing it did was judge "
            "me for buying it.",
            created_at=now - timedelta(hours=2),
        )
    )
    comments.set(
        Comment(
            id=2,
            post_id=1,
            user_id=1,
            content="There's one born every minute.",
            created_at=now - timedelta(hours=1),
        )
    )
    return comments


def build_resolver(rng: random.Random | None = None) -> Resolver:
    """Return a resolver over freshly seeded services."""
    return Resolver(
        user_service=init_users(),
        post_service=init_posts(rng),
        comment_service=init_comments(),
    )