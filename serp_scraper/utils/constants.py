"""
Constants module - All configuration constants for the SERP scraper.

Centralizes:
- Scroll convergence bounds
- Default waits and timeouts
- In-page scripts shared by the scroll detector and the extractor
"""

# ============================================================================
# SCROLL CONVERGENCE
# ============================================================================

# Maximum poll cycles before convergence is forced regardless of marker state
SEARCH_RESULTS_SCROLL_COUNTER = 5

# ============================================================================
# WAITS (in seconds)
# ============================================================================

DEFAULT_SETTLE_DELAY = 1.0
DEFAULT_POLL_INTERVAL = 0.2
DEFAULT_RESULTS_DELAY = 0.2

# ============================================================================
# TIMEOUTS (in milliseconds)
# ============================================================================

DEFAULT_NAVIGATION_TIMEOUT = 30000

# ============================================================================
# OUTPUT
# ============================================================================

DEFAULT_OUTPUT_DIR = "output/data"
CSV_COLUMNS = ["title", "url", "description", "text"]

# ============================================================================
# IN-PAGE SCRIPTS
# ============================================================================

SCROLL_TO_BOTTOM_SCRIPT = "() => { window.scrollTo(0, document.body.scrollHeight); }"

# Returns the textContent of the first element matching the marker text
# (or of the first element at all when no text is given), null when absent.
FIND_MARKER_SCRIPT = """(elements, text) => {
    const match = elements.find((el) => text == null || (el.textContent || "").trim() === text);
    return match ? (match.textContent || "") : null;
}"""

ANY_ELEMENT_SCRIPT = "(elements) => elements.length > 0"

EXTRACT_RESULTS_SCRIPT = """(anchors, options) => anchors.map((anchor) => {
    const parent = anchor.parentNode;
    let description = null;
    if (options.container && options.snippet) {
        const container = anchor.closest(options.container);
        const snippet = container ? container.querySelector(options.snippet) : null;
        description = snippet ? snippet.textContent : null;
    }
    return {
        url: anchor.href || "",
        text: anchor.textContent || "",
        title: parent ? (parent.textContent || "") : "",
        description: description,
    };
})"""
