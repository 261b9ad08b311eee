import pytest

from repo_stats_card.domain.exceptions import InvalidInputError, RepositoryNotFoundError
from repo_stats_card.services.get_repo_stats import GetRepoStatsUseCase
from repo_stats_card.services.render_card import RenderCardUseCase
from repo_stats_card.services.styles import STYLE_ELEMENT_ID


@pytest.mark.asyncio
async def test_renders_card(fake_fetcher):
    use_case = RenderCardUseCase(GetRepoStatsUseCase(fake_fetcher))

    html = await use_case.render("octocat/hello-world")

    assert 'class="stat-card-container"' in html
    assert "No description provided" in html


@pytest.mark.asyncio
async def test_request_failure_renders_error_fragment(fetcher_factory):
    error = RepositoryNotFoundError("Error fetching repository data: 404", status_code=404)
    use_case = RenderCardUseCase(GetRepoStatsUseCase(fetcher_factory(error=error)))

    html = await use_case.render("octocat/hello-world")

    assert 'class="github-stats-card error"' in html
    assert "Error fetching repository data: 404" in html
    assert "stat-card-container" not in html


@pytest.mark.asyncio
async def test_invalid_input_is_raised(fake_fetcher):
    use_case = RenderCardUseCase(GetRepoStatsUseCase(fake_fetcher))

    with pytest.raises(InvalidInputError):
        await use_case.render("")


@pytest.mark.asyncio
async def test_page_carries_styles_once(fake_fetcher):
    use_case = RenderCardUseCase(GetRepoStatsUseCase(fake_fetcher))

    page = await use_case.render_page("octocat/hello-world")

    assert page.count(f'id="{STYLE_ELEMENT_ID}"') == 1
    assert 'class="stat-card-container"' in page


@pytest.mark.asyncio
async def test_malformed_payload_renders_error_fragment(fake_fetcher):
    del fake_fetcher.repo_data["created_at"]
    use_case = RenderCardUseCase(GetRepoStatsUseCase(fake_fetcher))

    html = await use_case.render("octocat/hello-world")

    assert 'class="github-stats-card error"' in html
    assert "Unexpected repository data" in html
