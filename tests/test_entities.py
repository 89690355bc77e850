"""Tests for core entities."""

import pytest

from readme_survey.core import Repository


def test_repository_creation() -> None:
    """Test creating a valid repository."""
    repository = Repository(owner="dotnet", name="runtime", stars=15000)

    assert repository.full_name == "dotnet/runtime"
    assert repository.owner_link == "[dotnet](https://github.com/dotnet)"
    assert repository.repository_link == "[runtime](https://github.com/dotnet/runtime)"


def test_repository_identity_ignores_stars() -> None:
    """Repositories are deduplicated by owner and name only."""
    first = Repository(owner="dotnet", name="runtime", stars=10)
    second = Repository(owner="dotnet", name="runtime", stars=20)

    assert first == second
    assert len({first, second}) == 1
    assert Repository("dotnet", "runtime") != Repository("dotnet", "aspnetcore")


def test_repository_validation() -> None:
    """Test repository validation."""
    with pytest.raises(ValueError, match="Owner cannot be empty"):
        Repository(owner="", name="runtime")

    with pytest.raises(ValueError, match="Name cannot be empty"):
        Repository(owner="dotnet", name="")

    with pytest.raises(ValueError, match="Stars cannot be negative"):
        Repository(owner="dotnet", name="runtime", stars=-1)
