"""
PhishGuard Navigation Actions

Maps a risk level to what the host should do with the page.
"""

from phishguard.models.detection import NavigationAction, RiskLevel


def recommend_action(
    risk_level: RiskLevel,
    block_suspicious: bool = False,
    show_warnings: bool = True,
) -> NavigationAction:
    """
    Get the navigation action for a risk level.

    Args:
        risk_level: Verdict from the engine
        block_suspicious: Block medium risk pages instead of warning
        show_warnings: Show a warning banner for medium risk pages

    Returns:
        NavigationAction
    """
    if risk_level == RiskLevel.HIGH:
        return NavigationAction.BLOCK
    if risk_level == RiskLevel.MEDIUM:
        if block_suspicious:
            return NavigationAction.BLOCK
        if show_warnings:
            return NavigationAction.WARN
    return NavigationAction.ALLOW
