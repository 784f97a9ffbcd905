import datetime
from typing import Tuple

from app.schemas.blog import PostMetadata
from app.services.post_directory import PostDirectory

POSTS: Tuple[PostMetadata, ...] = (
    PostMetadata(
        title="Create a game inside an NFT",
        slug="create-a-game-inside-an-nft",
        isPublished=True,
        datePublished=datetime.date(2023, 10, 13),
    ),
    PostMetadata(
        title="Create a Merkle Tree using NodeJs",
        slug="create-a-merkle-tree-using-nodejs",
        isPublished=True,
        datePublished=datetime.date(2022, 12, 22),
    ),
    PostMetadata(
        title="Dockerize a Node API",
        slug="dockerize-a-node-api",
        isPublished=True,
        datePublished=datetime.date(2022, 12, 3),
    ),
    PostMetadata(
        title="Build a simple GraphQL API with Go",
        slug="build-a-simple-graphql-api-with-go",
        isPublished=True,
        datePublished=datetime.date(2022, 11, 15),
    ),
    PostMetadata(
        title="Build a CRON job with GoCron",
        slug="build-a-cron-job-with-gocron",
        isPublished=True,
        datePublished=datetime.date(2022, 11, 12),
    ),
    PostMetadata(
        title="Configuring a Kubernetes NGINX Load Balancer",
        slug="configuring-a-kubernetes-nginx-load-balancer",
        isPublished=True,
        datePublished=datetime.date(2022, 10, 13),
    ),
    PostMetadata(
        title="Configuring a Kubernetes Cert Manager",
        slug="configuring-a-kubernetes-cert-manager",
        isPublished=True,
        datePublished=datetime.date(2022, 10, 12),
    ),
)


def build_post_directory() -> PostDirectory:
    return PostDirectory(POSTS)


# Global directory instance, built once at import and never mutated
post_directory = build_post_directory()
