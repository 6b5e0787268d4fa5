import pytest

import review_diff as rd
from review_diff.git import fallback_branch


@pytest.mark.anyio
async def test_current_branch(committed_repo):
    repo, _ = committed_repo
    lookup = await rd.resolve_current_branch(cwd=str(repo))
    assert lookup.name == "trunk"
    assert not lookup.is_fallback


@pytest.mark.anyio
async def test_current_branch_detached_head(committed_repo):
    repo, git = committed_repo
    git("checkout -q --detach")
    assert await rd.get_current_branch(cwd=str(repo)) == "HEAD"


@pytest.mark.anyio
async def test_current_branch_outside_repo(tmp_path):
    lookup = await rd.resolve_current_branch(cwd=str(tmp_path))
    assert lookup == ("HEAD", "fallback")
    assert lookup.is_fallback


@pytest.mark.anyio
async def test_default_branch_falls_back_to_master(committed_repo):
    repo, _ = committed_repo
    lookup = await rd.resolve_default_branch(cwd=str(repo))
    assert lookup.name == "master"
    assert lookup.is_fallback


@pytest.mark.anyio
async def test_default_branch_outside_repo(tmp_path):
    assert await rd.get_default_branch(cwd=str(tmp_path)) == "master"


@pytest.mark.anyio
async def test_default_branch_prefers_local_main(committed_repo):
    repo, git = committed_repo
    git("branch main")
    lookup = await rd.resolve_default_branch(cwd=str(repo))
    assert lookup == ("main", "local-main")


@pytest.mark.anyio
async def test_default_branch_from_origin_head(committed_repo):
    repo, git = committed_repo
    git("branch main")
    git("update-ref refs/remotes/origin/develop HEAD")
    git("symbolic-ref refs/remotes/origin/HEAD refs/remotes/origin/develop")

    lookup = await rd.resolve_default_branch(cwd=str(repo))
    assert lookup == ("develop", "origin-head")


@pytest.mark.anyio
async def test_default_branch_tiers_short_circuit(monkeypatch):
    calls = []

    async def fake_try_run(cmd, cwd=None):
        calls.append(cmd[1])
        return "refs/remotes/origin/trunk"

    monkeypatch.setattr("review_diff.git.branches.try_run", fake_try_run)
    assert await rd.get_default_branch() == "trunk"
    assert calls == ["symbolic-ref"]


def test_fallback_branch_kinds():
    assert fallback_branch("current").name == "HEAD"
    assert fallback_branch("default").name == "master"
    with pytest.raises(ValueError):
        fallback_branch("other")
