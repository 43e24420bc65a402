"""Tests for file classification."""

from __future__ import annotations

import pytest

from brulint.scanner.classifier import classify, is_check_scenario

REQUEST = "get {\n  url: {{baseUrl}}/students\n}\n"
DOC_ONLY = "meta {\n  name: Students\n}\n\ndocs {\n  Lists students.\n}\n"


class TestClassify:
    def test_request_file(self):
        c = classify("SIS/Students/List Students.bru", REQUEST)
        assert c.has_http_verb_block
        assert c.is_request_file
        assert not c.is_check_scenario

    def test_folder_bru_is_never_a_request_file(self):
        c = classify("SIS/Students/folder.bru", REQUEST)
        assert c.is_folder_doc
        assert c.has_http_verb_block
        assert not c.is_request_file

    def test_environment_files_are_never_request_files(self):
        c = classify("SIS/environments/local.bru", REQUEST)
        assert c.is_environment
        assert not c.is_request_file

    def test_environment_name_as_file_is_not_environment(self):
        c = classify("SIS/environments.bru", REQUEST)
        assert not c.is_environment

    def test_no_verb_block(self):
        c = classify("SIS/Students/Notes.bru", DOC_ONLY)
        assert not c.has_http_verb_block
        assert not c.is_request_file

    @pytest.mark.parametrize("verb", ["get", "post", "put", "patch", "delete"])
    def test_every_verb_opens_a_block(self, verb: str):
        c = classify("SIS/x.bru", f"{verb} {{\n  url: http://x\n}}\n")
        assert c.is_request_file

    def test_verb_must_be_line_anchored(self):
        c = classify("SIS/x.bru", "docs {\n  see the get { shape\n}\n")
        # Indented opener on its own line still counts, mid-line does not.
        assert not c.has_http_verb_block

    def test_backslash_paths(self):
        c = classify("SIS\\environments\\local.bru", REQUEST)
        assert c.is_environment


class TestCheckScenario:
    @pytest.mark.parametrize("name", [
        "01 - Check Students.bru",
        "3 - check schools.bru",
        "Check Students.bru",
    ])
    def test_matches(self, name: str):
        assert is_check_scenario(name)

    @pytest.mark.parametrize("name", [
        "Checklist.bru",
        "List Students.bru",
        "01 Check Students.bru",
        "check Students.bru",
    ])
    def test_does_not_match(self, name: str):
        assert not is_check_scenario(name)

    def test_flag_uses_base_name(self):
        c = classify("SIS/Check Folder/List.bru", REQUEST)
        assert not c.is_check_scenario
