"""Group validator findings for display.

An empty finding list becomes a single "fully compatible" affirmation.
Otherwise findings are grouped by severity (error, warning, suggestion),
keeping the validator's order inside each group.
"""

from models.responses import ATSReport, FindingGroup
from models.schemas.finding import SEVERITY_ORDER, Finding

COMPATIBLE_HEADLINE = "سيرتك متوافقة مع أنظمة ATS بالكامل!"
COMPATIBLE_HEADLINE_ALT = "Your CV is fully ATS-compatible!"


def build_report(findings: list[Finding]) -> ATSReport:
    if not findings:
        return ATSReport(
            compatible=True,
            total=0,
            headline=COMPATIBLE_HEADLINE,
            headline_alt=COMPATIBLE_HEADLINE_ALT,
        )

    groups = []
    for severity in SEVERITY_ORDER:
        members = [f for f in findings if f.severity == severity]
        if members:
            groups.append(FindingGroup(severity=severity, findings=members))

    total = len(findings)
    return ATSReport(
        compatible=False,
        total=total,
        headline=f"فحص ATS ({total} ملاحظة)",
        headline_alt=f"ATS check ({total} {'finding' if total == 1 else 'findings'})",
        groups=groups,
    )


def ordered_findings(report: ATSReport) -> list[Finding]:
    """Flatten a report back into display order."""
    return [f for group in report.groups for f in group.findings]
