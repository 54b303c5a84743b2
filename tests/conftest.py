"""Shared fixtures for analyzerview tests."""

import copy
import json
import os

import pytest

from analyzerview.core.models.parsers import normalize
from analyzerview.core.models.views import ViewFeatures

BASE = "/work/proj/force-app/main/default"

SAMPLE_REPORT = {
    "runDir": "/work/proj/",
    "violationCounts": {"total": 5, "sev1": 1, "sev2": 2, "sev3": 2, "sev4": 0, "sev5": 0},
    "versions": {"code-analyzer": "5.0.0"},
    "violations": [
        {
            "rule": "ApexCRUDViolation",
            "engine": "pmd",
            "severity": 2,
            "tags": ["Recommended", "Security", "Apex"],
            "primaryLocationIndex": 0,
            "locations": [
                {"file": f"{BASE}/classes/AccountService.cls", "startLine": 12, "startColumn": 5}
            ],
            "message": "Validate CRUD permission before SOQL/DML operation",
            "resources": [
                "https://pmd.github.io/pmd/pmd_rules_apex_security.html#apexcrudviolation",
                "https://developer.salesforce.com/docs/crud",
            ],
        },
        {
            "rule": "ApexDoc",
            "engine": "pmd",
            "severity": 3,
            "tags": ["Documentation"],
            "primaryLocationIndex": 0,
            "locations": [{"file": f"{BASE}/classes/AccountService.cls", "startLine": 1}],
            "message": "Missing ApexDoc comment",
            "resources": [],
        },
        {
            "rule": "ApexCRUDViolation",
            "engine": "pmd",
            "severity": 1,
            "tags": ["Other"],
            "primaryLocationIndex": 0,
            "locations": [{"file": f"{BASE}/classes/ContactService.cls", "startLine": 40}],
            "message": "Validate CRUD permission before SOQL/DML operation",
        },
        {
            "rule": "@lwc/lwc/no-api-reassignments",
            "engine": "eslint",
            "severity": "2",
            "tags": ["Recommended", "LWC"],
            "locations": [{"file": f"{BASE}/lwc/accountList/accountList.js", "startLine": 8}],
            "message": "Invalid reassignment of public property \"recordId\"",
        },
        {
            "rule": "ApexFlsViolation",
            "engine": "sfge",
            "severity": 3,
            "tags": ["Security"],
            "primaryLocationIndex": 1,
            "locations": [
                {"file": f"{BASE}/classes/AccountController.cls", "startLine": 20},
                {"file": f"{BASE}/classes/AccountService.cls", "startLine": 30},
            ],
            "message": "FLS validation is missing for [READ] operation on [Account]",
            "sinkFileName": f"{BASE}/classes/AccountController.cls",
        },
    ],
}


@pytest.fixture
def sample_report():
    return copy.deepcopy(SAMPLE_REPORT)


@pytest.fixture
def sample_text(sample_report):
    return json.dumps(sample_report)


@pytest.fixture
def normalized(sample_text):
    return normalize(sample_text)


@pytest.fixture
def records(normalized):
    return normalized.records


@pytest.fixture
def features():
    return ViewFeatures()


@pytest.fixture
def all_features():
    return ViewFeatures(grouping_modes=("engine", "typefilename", "filename", "rule"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("ANALYZERVIEW_"):
            monkeypatch.delenv(key)
