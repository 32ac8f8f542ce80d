"""Populate the database with sample users, categories, posts and comments.

Usage:
    python -m blog_api.seed [--admin-password SECRET] [--seed 42]
"""

import argparse
import asyncio
import logging
import random

from blog_api.config.database import dispose_engine, get_async_session_local, init_models
from blog_api.config.logging import configure_logging
from blog_api.constants import Role
from blog_api.models import User
from blog_api.policies import Identity
from blog_api.services import CategoryService, CommentService, PostService, Store, UserService

logger = logging.getLogger("blog_api.seed")

SAMPLE_PASSWORD = "password"

USERS = [
    ("alice", "alice@example.com"),
    ("bob", "bob@example.com"),
    ("charlie", "charlie@example.com"),
    ("dave", "dave@example.com"),
    ("eve", "eve@example.com"),
    ("frank", "frank@example.com"),
    ("grace", "grace@example.com"),
    ("heidi", "heidi@example.com"),
    ("ivan", "ivan@example.com"),
    ("judy", "judy@example.com"),
]

CATEGORIES = [
    ("Technology", "All things related to technology"),
    ("Web Development", "Web development topics and tutorials"),
    ("Security", "Cybersecurity, authentication, and encryption"),
    ("Databases", "Topics related to relational and NoSQL databases"),
    ("Python", "Python tutorials, tips, and best practices"),
    ("APIs", "Building and consuming APIs"),
    ("Frontend", "Frontend technologies and frameworks"),
    ("Backend", "Backend technologies and practices"),
]

POSTS = [
    ("Exploring FastAPI", "FastAPI is a modern framework for building APIs with Python type hints."),
    ("Understanding REST APIs", "REST APIs allow clients to communicate with servers using HTTP."),
    ("Intro to JWT Authentication", "JWT is a compact way to transmit identity claims between systems."),
    ("What is SQLAlchemy?", "SQLAlchemy is a Python toolkit and ORM for relational databases."),
    ("Async Python Basics", "asyncio lets a single thread serve many concurrent connections."),
    ("Frontend vs Backend", "Understand the difference between frontend and backend development."),
    ("Database Design 101", "Database design is crucial for efficient data storage and retrieval."),
    ("Building Secure Applications", "Security is paramount when building applications handling user data."),
]

COMMENTS = [
    "Great post! Really helpful.",
    "I learned a lot from this article.",
    "Thank you for sharing this information.",
    "This clarifies so many concepts for me.",
    "I have a question about authentication...",
    "Can you explain more about API security?",
    "Fantastic breakdown of the topic.",
    "Looking forward to more posts like this.",
    "Is there a follow-up post?",
    "The section on JWTs was very informative.",
]


def identity_for(user: User) -> Identity:
    return Identity(id=user.id, username=user.username, role=user.role)


async def seed(admin_password: str, rng: random.Random) -> None:
    """Create the sample data set through the services."""
    session_local = get_async_session_local()
    async with session_local() as session:
        store = Store(session)
        user_service = UserService(store)
        category_service = CategoryService(store)
        post_service = PostService(store)
        comment_service = CommentService(store)

        admin = await user_service.create_user(
            {
                "username": "admin",
                "email": "admin@example.com",
                "password": admin_password,
                "role": Role.ADMIN.value,
            }
        )

        users = [
            await user_service.create_user(
                {"username": username, "email": email, "password": SAMPLE_PASSWORD}
            )
            for username, email in USERS
        ]

        categories = await category_service.create_categories(
            [{"name": name, "description": description} for name, description in CATEGORIES],
            identity_for(admin),
        )

        posts = []
        for title, content in POSTS:
            author = rng.choice(users)
            post = await post_service.create_post(
                {
                    "title": title,
                    "content": content,
                    "status": rng.choice(["draft", "published"]),
                    "category_id": rng.choice(categories).id,
                },
                identity_for(author),
            )
            posts.append(post)

        for content in COMMENTS:
            await comment_service.create_comment(
                {"post_id": str(rng.choice(posts).id), "content": content},
                identity_for(rng.choice(users)),
            )

    logger.info(
        "Sample data created",
        extra={
            "users": len(users) + 1,
            "categories": len(categories),
            "posts": len(posts),
            "comments": len(COMMENTS),
        },
    )


async def main(args: argparse.Namespace) -> None:
    await init_models()
    try:
        await seed(args.admin_password, random.Random(args.seed))
    finally:
        await dispose_engine()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--admin-password",
        default=SAMPLE_PASSWORD,
        help="password for the 'admin' account (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for assignments")
    return parser.parse_args(argv)


def run(argv=None) -> None:
    configure_logging()
    asyncio.run(main(parse_args(argv)))


if __name__ == "__main__":
    run()
