# constants.py

# =============================================================================
# --- QUADTREE SETTINGS ---
# =============================================================================
QUADTREE_CAPACITY = 4 # Max points held directly by a node before it subdivides
QUADTREE_MAX_DEPTH = 64 # Deepest level a node may split to; deeper points overflow the leaf bucket. None = unbounded
COORDINATE_DTYPE = "float64" # dtype used when bulk-loading coordinates through numpy

# =============================================================================
# --- COORDINATE TRANSFORMS ---
# =============================================================================
FLIP_HEIGHT = 600 # Height of the surface that flip() reflects y coordinates against

# =============================================================================
# --- LOGGING ---
# =============================================================================
LOG_VERBOSE = False # Emit per-node debug messages (subdivisions, overflow buckets)
LOG_TIME_PRECISION = 3 # Decimal places of the elapsed-seconds timestamp
