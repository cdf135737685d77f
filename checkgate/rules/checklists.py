"""
Built-in checklists.

Ships the Pre-Commit and Security checklists as ready-made rule sets so a
project can gate changes without writing a rules file. Rule identifiers are
centralized in the CheckID enum; external tooling reports signals under
these identifiers.
"""

from enum import StrEnum

from checkgate.core.errors import UnknownChecklistError
from checkgate.core.models import RuleCategory
from checkgate.rules.models import Rule, RuleSet


class Checklist(StrEnum):
    """Names of the built-in checklists."""

    PRE_COMMIT = "pre-commit"
    SECURITY = "security"
    DEFAULT = "default"


class CheckID(StrEnum):
    """Standardized rule identifiers used by the built-in checklists."""

    # Pre-commit
    TESTS_PASS = "tests-pass"
    LINT_CLEAN = "lint-clean"
    TYPE_CHECK = "type-check"
    BUILD_SUCCEEDS = "build-succeeds"
    NO_DEBUG_STATEMENTS = "no-debug-statements"
    NEW_CODE_TESTED = "new-code-tested"
    DOCS_UPDATED = "docs-updated"
    # Security
    NO_HARDCODED_SECRETS = "no-hardcoded-secrets"
    INPUT_VALIDATION = "input-validation"
    PARAMETERIZED_QUERIES = "parameterized-queries"
    OUTPUT_ESCAPING = "output-escaping"
    CSRF_PROTECTION = "csrf-protection"
    AUTHORIZATION_CHECKS = "authorization-checks"
    DEPENDENCY_AUDIT = "dependency-audit"


CHECK_ID_TO_DESCRIPTION: dict[CheckID, str] = {
    CheckID.TESTS_PASS: "All tests pass",
    CheckID.LINT_CLEAN: "Linter reports no errors",
    CheckID.TYPE_CHECK: "Type checker reports no errors",
    CheckID.BUILD_SUCCEEDS: "Project builds without errors",
    CheckID.NO_DEBUG_STATEMENTS: "No leftover debug statements or console output",
    CheckID.NEW_CODE_TESTED: "New or changed code is covered by tests",
    CheckID.DOCS_UPDATED: "Documentation updated for user-facing changes",
    CheckID.NO_HARDCODED_SECRETS: "No secrets, tokens or credentials committed",
    CheckID.INPUT_VALIDATION: "All external input is validated",
    CheckID.PARAMETERIZED_QUERIES: "Database queries are parameterized",
    CheckID.OUTPUT_ESCAPING: "User-supplied output is escaped",
    CheckID.CSRF_PROTECTION: "State-changing endpoints are CSRF protected",
    CheckID.AUTHORIZATION_CHECKS: "Protected resources check authorization",
    CheckID.DEPENDENCY_AUDIT: "Dependency audit reports no known vulnerabilities",
}


def _rule(check_id: CheckID, category: RuleCategory, required: bool = True) -> Rule:
    return Rule(
        id=check_id.value,
        category=category,
        description=CHECK_ID_TO_DESCRIPTION[check_id],
        required=required,
    )


PRE_COMMIT_CHECKLIST = RuleSet.of(
    _rule(CheckID.TESTS_PASS, RuleCategory.TESTING),
    _rule(CheckID.LINT_CLEAN, RuleCategory.CODE_QUALITY),
    _rule(CheckID.TYPE_CHECK, RuleCategory.CODE_QUALITY),
    _rule(CheckID.BUILD_SUCCEEDS, RuleCategory.CODE_QUALITY),
    _rule(CheckID.NO_DEBUG_STATEMENTS, RuleCategory.CODE_QUALITY, required=False),
    _rule(CheckID.NEW_CODE_TESTED, RuleCategory.TESTING, required=False),
    _rule(CheckID.DOCS_UPDATED, RuleCategory.DOCUMENTATION, required=False),
    name=Checklist.PRE_COMMIT.value,
)

SECURITY_CHECKLIST = RuleSet.of(
    _rule(CheckID.NO_HARDCODED_SECRETS, RuleCategory.SECURITY),
    _rule(CheckID.INPUT_VALIDATION, RuleCategory.SECURITY),
    _rule(CheckID.PARAMETERIZED_QUERIES, RuleCategory.SECURITY),
    _rule(CheckID.OUTPUT_ESCAPING, RuleCategory.SECURITY),
    _rule(CheckID.CSRF_PROTECTION, RuleCategory.SECURITY),
    _rule(CheckID.AUTHORIZATION_CHECKS, RuleCategory.SECURITY),
    _rule(CheckID.DEPENDENCY_AUDIT, RuleCategory.SECURITY, required=False),
    name=Checklist.SECURITY.value,
)

DEFAULT_CHECKLIST = PRE_COMMIT_CHECKLIST.combine(SECURITY_CHECKLIST, name=Checklist.DEFAULT.value)

CHECKLISTS: dict[Checklist, RuleSet] = {
    Checklist.PRE_COMMIT: PRE_COMMIT_CHECKLIST,
    Checklist.SECURITY: SECURITY_CHECKLIST,
    Checklist.DEFAULT: DEFAULT_CHECKLIST,
}


def get_checklist(name: str) -> RuleSet:
    """Return a built-in checklist by name; raises UnknownChecklistError."""
    try:
        return CHECKLISTS[Checklist(name.strip().lower())]
    except ValueError:
        raise UnknownChecklistError(name) from None
