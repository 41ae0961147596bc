"""Invalidation policy: own keys, paged sweep, and related-type cascade."""

import pytest

from app.domain.enums import CacheMutation
from app.infrastructure.cache import (
    PORTFOLIO_USER_KEYS,
    PROJECT_KEYS,
    SKILL_KEYS,
    CacheInvalidator,
    CacheService,
    keys_to_clear,
)

ALL_KEYS = (PORTFOLIO_USER_KEYS, PROJECT_KEYS, SKILL_KEYS)


async def _fill(cache: CacheService) -> None:
    """Cache every view of every type, including two tracked pages each."""
    for keys in ALL_KEYS:
        await cache.set(keys.list_key, [])
        await cache.set(keys.summary, [])
        await cache.set(keys.total_count, 10)
        await cache.set(keys.item(1), {"id": 1})
        await cache.set(keys.item(2), {"id": 2})
        for page in (1, 2):
            await cache.set(keys.page(page, 5), {"items": []})
            await cache.track_paged_key(keys.paged_tracking, keys.page(page, 5))


async def _present(cache: CacheService, key: str) -> bool:
    return await cache.try_get(key) is not None


def test_create_clears_list_summary_and_count() -> None:
    assert keys_to_clear(PROJECT_KEYS, CacheMutation.CREATE) == [
        "Projects",
        "AllProjectsSummary",
        "ProjectsTotalCount",
    ]


@pytest.mark.parametrize("mutation", [CacheMutation.UPDATE, CacheMutation.DELETE])
def test_update_and_delete_also_clear_item(mutation: CacheMutation) -> None:
    assert keys_to_clear(SKILL_KEYS, mutation, 9) == [
        "Skills",
        "AllSkillsSummary",
        "SkillsTotalCount",
        "Skill_9",
    ]


@pytest.mark.parametrize("mutation", [CacheMutation.UPDATE, CacheMutation.DELETE])
def test_update_and_delete_require_id(mutation: CacheMutation) -> None:
    with pytest.raises(ValueError):
        keys_to_clear(PROJECT_KEYS, mutation)


async def test_create_project_clears_own_views_and_owner_aggregates(cache, invalidator) -> None:
    await _fill(cache)

    await invalidator.invalidate(
        PROJECT_KEYS, CacheMutation.CREATE, 3, {"PortfolioUser": {1}}
    )

    for key in (
        "Projects",
        "AllProjectsSummary",
        "ProjectsTotalCount",
        "ProjectsPaged_Page1_Size5",
        "ProjectsPaged_Page2_Size5",
        "PortfolioUsers",
        "AllPortfolioUsersSummary",
        "PortfolioUsersPaged_Page1_Size5",
        "PortfolioUser_1",
        "PortfolioUsersTotalCount",
    ):
        assert not await _present(cache, key), key
    assert await cache.get_tracked_keys(PROJECT_KEYS.paged_tracking) == set()
    # Untouched: other project items, unrelated owners, skills
    for key in (
        "Project_1",
        "PortfolioUser_2",
        "Skills",
        "AllSkillsSummary",
        "SkillsPaged_Page1_Size5",
    ):
        assert await _present(cache, key), key


async def test_update_clears_item_key(cache, invalidator) -> None:
    await _fill(cache)
    await invalidator.invalidate(SKILL_KEYS, CacheMutation.UPDATE, 2)
    assert not await _present(cache, "Skill_2")
    assert await _present(cache, "Skill_1")


async def test_portfolio_user_mutation_cascades_to_projects_and_skills(cache, invalidator) -> None:
    await _fill(cache)

    await invalidator.invalidate(
        PORTFOLIO_USER_KEYS,
        CacheMutation.DELETE,
        1,
        {"Project": [1], "Skill": [1, 2]},
    )

    for key in (
        "PortfolioUser_1",
        "PortfolioUsersTotalCount",
        "Projects",
        "AllProjectsSummary",
        "ProjectsPaged_Page2_Size5",
        "Project_1",
        "ProjectsTotalCount",
        "Skills",
        "AllSkillsSummary",
        "SkillsTotalCount",
        "SkillsPaged_Page1_Size5",
        "Skill_1",
        "Skill_2",
    ):
        assert not await _present(cache, key), key
    assert await _present(cache, "Project_2")


async def test_invalidate_all_clears_aggregates_of_every_type(cache, invalidator) -> None:
    await _fill(cache)
    await invalidator.invalidate_all()
    for keys in ALL_KEYS:
        for key in (keys.list_key, keys.summary, keys.total_count, keys.page(1, 5)):
            assert not await _present(cache, key), key


async def test_invalidation_on_empty_cache_is_noop(invalidator: CacheInvalidator) -> None:
    await invalidator.invalidate(PROJECT_KEYS, CacheMutation.DELETE, 1, {"PortfolioUser": [4]})
