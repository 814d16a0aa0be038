"""Test for __main__.py module."""

from unittest.mock import patch


def test_main_module():
    """Test that __main__.py can be imported and calls cli."""
    with patch('container_lifecycle.cli.main.cli') as mock_cli:
        import container_lifecycle.__main__
        mock_cli.assert_not_called()
