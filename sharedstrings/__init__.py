from .formatting import PlaceholderError, count_placeholders, substitute

from .locale_utils import (
    EnvironmentLocaleSource,
    FixedLocaleSource,
    is_rtl_language,
    normalize_tag
)

from .store import (
    DocumentStore,
    InlineStore,
    ResourceStore,
    StringTable,
    make_table
)

from .resolver import (
    StringResolver,
    create_string_resolver
)

from .strings import (
    SharedStrings,
    StringKeys,
    demonstrate_string_access
)

from .export import (
    ExportTarget,
    export_locale,
    parse_android_xml,
    parse_apple_strings,
    render
)
