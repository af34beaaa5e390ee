"""
Type mappings and configuration constants
"""

# ABI base type -> ink! type
ABI_TYPE_TO_INK = {
    "bool": "bool",
    "address": "H160",
    # Every uint width is widened to U256; narrower ink! types are not used yet
    "uint": "U256",
    "bytes": "Vec<u8>",
}

# Composite type shapes
FIXED_BYTES_TO_INK = "[u8; {size}]"
ARRAY_TO_INK = "Vec<{inner}>"
FIXED_ARRAY_TO_INK = "[{inner}; {size}]"
TUPLE_TO_INK = "({items})"

# Function filtering
FUNCTION_ENTRY_TYPE = "function"
READ_ONLY_MUTABILITY = "view"
WRAPPED_OUTPUT_TYPE = "bool"

# Selector
SELECTOR_SIZE = 4

# Generated module defaults
DEFAULT_EVM_ID = "0x0F"
EVM_ID_ENV_VAR = "SUMI_EVM_ID"
UNNAMED_INPUT_PREFIX = "arg"

# Rust keywords usable as raw identifiers (`r#type`)
RUST_KEYWORDS = {
    "as", "async", "await", "break", "const", "continue", "dyn", "else",
    "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let",
    "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
    "static", "struct", "trait", "true", "type", "unsafe", "use", "where",
    "while", "abstract", "become", "box", "do", "final", "macro",
    "override", "priv", "try", "typeof", "unsized", "virtual", "yield",
}
# Keywords that cannot be raw identifiers get a trailing underscore
RUST_RESERVED_IDENTIFIERS = {"self", "Self", "super", "crate", "_"}

# Items of the module template that generated names must not collide with
TEMPLATE_METHODS = {"new"}
ENCODE_HELPER_SUFFIX = "_encode"
# Locals of the generated encode helper; inputs with these names get a trailing underscore
TEMPLATE_LOCALS = {"encoded"}
