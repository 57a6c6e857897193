"""Example tables in the format the dashboard expects.

Used as input-view placeholders and by ``build_dashboard.py --sample``.
"""

KEYWORD_SAMPLE = """Category\tKeyword
GIT/VC\tpush
GIT/VC\tgit push
Authentication & Access\tAccess Token
Authentication & Access\ttoken
Programming & Development\tpip
Programming & Development\tpython
"""

TRENDING_SAMPLE = """Term\tSearches\tCTR
push\t79\t59.50%
pip\t50\t58%
Function Overview\t49\t36.80%
"""

TOPICS_SAMPLE = """Topic\tViews
I can't push\t266
Projects: Collaboration with Version Control\t251
403 error occurs when pushing\t190
"""
