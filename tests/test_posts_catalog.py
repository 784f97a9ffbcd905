import datetime

from app.posts_catalog import POSTS, build_post_directory, post_directory


def test_catalog_has_all_authored_posts_in_order():
    snapshot = post_directory.get_snapshot()

    assert len(snapshot) == 7
    assert snapshot == POSTS
    assert snapshot[0].slug == "create-a-game-inside-an-nft"
    assert snapshot[-1].slug == "configuring-a-kubernetes-cert-manager"


def test_catalog_slugs_are_unique():
    slugs = [p.slug for p in POSTS]
    assert len(set(slugs)) == len(slugs)


def test_catalog_dates_are_plain_dates():
    first = POSTS[0]
    assert first.datePublished == datetime.date(2023, 10, 13)
    assert all(p.isPublished for p in POSTS)


def test_build_post_directory_matches_global_instance():
    assert build_post_directory().get_snapshot() == post_directory.get_snapshot()
