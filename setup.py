from pathlib import Path
from setuptools import setup, find_packages

ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding="utf-8")

setup(
    name="firestore_blog_graphql",
    version="0.1.0",
    description="GraphQL API for users, posts and comments stored in Google Cloud Firestore",
    long_description=README,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0,<3.0.0",
        "pydantic-settings>=2.0",
        "google-cloud-firestore>=2.11.0",  # where(filter=FieldFilter(...))
        "google-auth>=2.0",
        "strawberry-graphql>=0.230.0",
        "graphql-core>=3.2",
        "fastapi>=0.100",
        "uvicorn>=0.23",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio", "httpx"],
        "dev": ["black", "ruff", "pytest", "pytest-asyncio", "httpx"],
    },
    entry_points={
        "console_scripts": [
            "firestore-blog-graphql=firestore_blog_graphql.app:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Framework :: AsyncIO",
        "Framework :: FastAPI",
        "Topic :: Database :: Front-Ends",
    ],
    keywords=[
        "firestore",
        "graphql",
        "strawberry",
        "pydantic",
        "asyncio",
    ],
)
