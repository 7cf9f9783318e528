"""Common literal values shared by the book plugins.

Plugin namespaces, marker selectors, and template names live here so the
config resolver, the annotators, and the tests import the same values without
drifting. Intended for internal use within the book_plugins package.

Examples
--------
>>> from book_plugins import _constants
>>> _constants.SIDEBAR_STYLE
'sidebar-style'
>>> _constants.SIDEBAR_HEADER_SELECTOR
'div.sidebar-header'
"""

ANCRE_NAVIGATION = "ancre-navigation"
SIDEBAR_STYLE = "sidebar-style"
PLUGIN_NAMESPACES = (ANCRE_NAVIGATION, SIDEBAR_STYLE)

NO_NAV_MARKER = "<!-- ex_nonav -->"
TOC_PLACEHOLDER_TAG = "extoc"
ANCHOR_NAVIGATION_ID = "anchor-navigation-ex"
GO_TOP_ID = "anchorNavigationExGoTop"

BOOK_SUMMARY_SELECTOR = ".book-summary"
SUMMARY_ENTRY_SELECTOR = ".summary li"
SIDEBAR_HEADER_SELECTOR = "div.sidebar-header"
AUTHOR_CREDIT_PREFIX = "作者："

ANCHOR_NAVIGATION_TEMPLATE = "anchor_navigation.jinja"
GO_TOP_TEMPLATE = "go_top.jinja"
SIDEBAR_HEADER_TEMPLATE = "sidebar_header.jinja"
AUTHOR_CREDIT_TEMPLATE = "author_credit.jinja"
