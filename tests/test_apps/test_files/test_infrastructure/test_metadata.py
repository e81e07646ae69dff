"""Tests for path and name helpers."""

import os

import pytest
from django.core.exceptions import ValidationError

from safespace.apps.files.infrastructure.metadata import (
    apply_extension,
    extract_filename,
    get_file_extension,
    join_path,
    to_storage_name,
    validate_entry_name,
)


def test_join_path():
    """Test joining components with the platform separator."""
    result = join_path('/data/root', 'docs', 'a.txt')

    assert result == os.sep.join(('/data/root', 'docs', 'a.txt'))


def test_join_path_collapses_doubled_separator():
    """Test an empty component does not leave a doubled separator."""
    assert join_path('/data/root', '', 'a.txt') == f'/data/root{os.sep}a.txt'


def test_join_path_single_collapse_pass():
    """Test only one collapse pass is applied."""
    tripled = os.sep * 3

    assert join_path(f'a{tripled}b') == f'a{os.sep * 2}b'


def test_to_storage_name():
    """Test relative storage names skip empty components."""
    assert to_storage_name('') == ''
    assert to_storage_name('', 'a.txt') == 'a.txt'
    assert to_storage_name('docs', 'a.txt') == f'docs{os.sep}a.txt'
    assert to_storage_name(f'{os.sep}docs{os.sep}') == 'docs'


def test_extract_filename():
    """Test filename extraction from path."""
    assert extract_filename('/tmp/documents/test.pdf') == 'test.pdf'
    assert extract_filename('test.txt') == 'test.txt'


def test_get_file_extension():
    """Test the extension is whatever follows the last dot."""
    assert get_file_extension('document.pdf') == 'pdf'
    assert get_file_extension('archive.tar.gz') == 'gz'
    assert get_file_extension('Photo.JPG') == 'JPG'
    assert get_file_extension('.profile') == 'profile'
    assert get_file_extension('README') == ''


class TestApplyExtension:
    """Tests for apply_extension function."""

    def test_keeps_extension(self):
        """Test the old extension is appended to the new name."""
        assert apply_extension('notes.txt', 'todo') == 'todo.txt'

    def test_keeps_last_extension_only(self):
        """Test only the last extension is carried over."""
        assert apply_extension('backup.tar.gz', 'archive') == 'archive.gz'

    def test_no_dot(self):
        """Test names without a dot are used as given."""
        assert apply_extension('Makefile', 'Rules') == 'Rules'

    def test_trailing_dot(self):
        """Test a trailing dot carries an empty extension."""
        assert apply_extension('odd.', 'even') == 'even.'


class TestValidateEntryName:
    """Tests for validate_entry_name function."""

    def test_valid_names(self):
        """Test ordinary names pass."""
        validate_entry_name('report.pdf')
        validate_entry_name('.hidden')
        validate_entry_name('My Documents')

    @pytest.mark.parametrize('name', ['', '.', '..'])
    def test_rejects_empty_and_reserved(self, name):
        """Test empty and reserved names are rejected."""
        with pytest.raises(ValidationError):
            validate_entry_name(name)

    def test_rejects_separator(self):
        """Test names that address another directory are rejected."""
        with pytest.raises(ValidationError):
            validate_entry_name(f'..{os.sep}escape.txt')

    def test_rejects_null_bytes(self):
        """Test null bytes are rejected."""
        with pytest.raises(ValidationError):
            validate_entry_name('file\x00.txt')
