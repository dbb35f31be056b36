"""
Attribute Rule Tables.

Static classification data for markup attributes, keyed by the name the
component framework expects (React DOM naming). The attribute engine walks
these tables in a fixed priority order:

1. ``style``
2. ``RENAMED_ATTRIBUTES``             exact, case-sensitive source name
3. ``EVENT_HANDLER_ATTRIBUTES``       case-insensitive
4. ``SVG_BOOLEAN_ATTRIBUTES``         exact, case-sensitive
5. ``BOOLEAN_ATTRIBUTES``             case-insensitive
6. ``NUMBER_ATTRIBUTES``              case-insensitive
7. ``SVG_CAMELIZED_ATTRIBUTES``       exact, kebab/colon case
8. ``MIXED_CASE_ATTRIBUTES``          case-insensitive
9. pass through unchanged

Case-insensitive tables are stored in their canonical output casing; lookups
go through the lower-cased indexes at the bottom of the module.
"""

from typing import Dict, FrozenSet, Tuple

# Attributes whose output name is not derivable from the source name.
RENAMED_ATTRIBUTES: Dict[str, str] = {
  "accept-charset": "acceptCharset",
  "class": "className",
  "for": "htmlFor",
  "http-equiv": "httpEquiv",
}

# Event handlers whose inline code is turned into a function.
EVENT_HANDLER_ATTRIBUTES: Tuple[str, ...] = (
  "onAbort",
  "onAnimationEnd",
  "onAnimationIteration",
  "onAnimationStart",
  "onAuxClick",
  "onBeforeInput",
  "onBlur",
  "onCanPlay",
  "onCanPlayThrough",
  "onChange",
  "onClick",
  "onClose",
  "onCompositionEnd",
  "onCompositionStart",
  "onCompositionUpdate",
  "onContextMenu",
  "onCopy",
  "onCut",
  "onDoubleClick",
  "onDrag",
  "onDragEnd",
  "onDragEnter",
  "onDragExit",
  "onDragLeave",
  "onDragOver",
  "onDragStart",
  "onDrop",
  "onDurationChange",
  "onEmptied",
  "onEncrypted",
  "onEnded",
  "onError",
  "onFocus",
  "onGotPointerCapture",
  "onInput",
  "onInvalid",
  "onKeyDown",
  "onKeyPress",
  "onKeyUp",
  "onLoad",
  "onLoadedData",
  "onLoadedMetadata",
  "onLoadStart",
  "onLostPointerCapture",
  "onMouseDown",
  "onMouseEnter",
  "onMouseLeave",
  "onMouseMove",
  "onMouseOut",
  "onMouseOver",
  "onMouseUp",
  "onPaste",
  "onPause",
  "onPlay",
  "onPlaying",
  "onPointerCancel",
  "onPointerDown",
  "onPointerEnter",
  "onPointerLeave",
  "onPointerMove",
  "onPointerOut",
  "onPointerOver",
  "onPointerUp",
  "onProgress",
  "onRateChange",
  "onReset",
  "onResize",
  "onScroll",
  "onSeeked",
  "onSeeking",
  "onSelect",
  "onStalled",
  "onSubmit",
  "onSuspend",
  "onTimeUpdate",
  "onToggle",
  "onTouchCancel",
  "onTouchEnd",
  "onTouchMove",
  "onTouchStart",
  "onTransitionEnd",
  "onVolumeChange",
  "onWaiting",
  "onWheel",
)

# Enumerated SVG attributes accepting "true" and "false". SVG attribute names
# are case-sensitive, so these only match exactly.
SVG_BOOLEAN_ATTRIBUTES: Tuple[str, ...] = (
  "autoReverse",
  "externalResourcesRequired",
  "focusable",
  "preserveAlpha",
)

# HTML boolean attributes, plus enumerated attributes accepting "true" and
# "false". Values other than true/false/empty/self-named are left as strings,
# e.g. download="file.exe".
BOOLEAN_ATTRIBUTES: Tuple[str, ...] = (
  # Enumerated
  "contentEditable",
  "draggable",
  "spellCheck",
  "value",
  # Enumerated with other accepted values
  "capture",
  "download",
  # Boolean
  "allowFullScreen",
  "async",
  "autoFocus",
  "autoPlay",
  "checked",
  "controls",
  "default",
  "defer",
  "disabled",
  "disablePictureInPicture",
  "disableRemotePlayback",
  "formNoValidate",
  "hidden",
  "itemScope",
  "loop",
  "multiple",
  "muted",
  "noModule",
  "noValidate",
  "open",
  "playsInline",
  "readOnly",
  "required",
  "reversed",
  "scoped",
  "seamless",
  "selected",
)

# Boolean attributes where the bare shorthand reads differently from the
# markup, so a true value stays an explicit `={true}` expression.
KEEP_TRUE_EXPRESSION: FrozenSet[str] = frozenset({"checked", "disabled", "selected", "value"})

# Attributes holding a number.
NUMBER_ATTRIBUTES: Tuple[str, ...] = (
  "border",
  "cols",
  "colSpan",
  "maxLength",
  "minLength",
  "rows",
  "rowSpan",
  "size",
  "span",
  "start",
  "tabIndex",
)

# Kebab-case and colon-case SVG presentation attributes. The flag marks values
# that are converted to a number when possible.
SVG_CAMELIZED_ATTRIBUTES: Dict[str, bool] = {
  "accent-height": False,
  "alignment-baseline": False,
  "arabic-form": False,
  "baseline-shift": False,
  "cap-height": True,
  "clip-path": False,
  "clip-rule": False,
  "color-interpolation": False,
  "color-interpolation-filters": False,
  "color-profile": False,
  "color-rendering": False,
  "dominant-baseline": False,
  "enable-background": False,
  "fill-opacity": False,
  "fill-rule": False,
  "flood-color": False,
  "flood-opacity": False,
  "font-family": False,
  "font-size": True,
  "font-size-adjust": True,
  "font-stretch": False,
  "font-style": False,
  "font-variant": False,
  "font-weight": True,
  "glyph-name": False,
  "glyph-orientation-horizontal": False,
  "glyph-orientation-vertical": False,
  "horiz-adv-x": True,
  "horiz-origin-x": True,
  "image-rendering": False,
  "letter-spacing": True,
  "lighting-color": False,
  "marker-end": False,
  "marker-mid": False,
  "marker-start": False,
  "overline-position": True,
  "overline-thickness": True,
  "paint-order": False,
  "panose-1": False,
  "pointer-events": False,
  "rendering-intent": False,
  "shape-rendering": False,
  "stop-color": False,
  "stop-opacity": False,
  "strikethrough-position": True,
  "strikethrough-thickness": True,
  "stroke-dasharray": False,
  "stroke-dashoffset": True,
  "stroke-linecap": False,
  "stroke-linejoin": False,
  "stroke-miterlimit": True,
  "stroke-opacity": False,
  "stroke-width": True,
  "text-anchor": False,
  "text-decoration": False,
  "text-rendering": False,
  "underline-position": True,
  "underline-thickness": True,
  "unicode-bidi": False,
  "unicode-range": False,
  "units-per-em": True,
  "v-alphabetic": True,
  "v-hanging": True,
  "v-ideographic": True,
  "v-mathematical": True,
  "vector-effect": False,
  "vert-adv-y": True,
  "vert-origin-x": True,
  "vert-origin-y": True,
  "word-spacing": True,
  "writing-mode": False,
  "xmlns:xlink": False,
  "x-height": True,
}

# Attributes the markup parser lower-cases but the framework spells in mixed case.
MIXED_CASE_ATTRIBUTES: Tuple[str, ...] = (
  "accessKey",
  "autoCapitalize",
  "autoComplete",
  "autoCorrect",
  "autoSave",
  "cellPadding",
  "cellSpacing",
  "charSet",
  "classID",
  "contextMenu",
  "controlsList",
  "crossOrigin",
  "dateTime",
  "encType",
  "enterKeyHint",
  "formAction",
  "formEncType",
  "formMethod",
  "formTarget",
  "frameBorder",
  "hrefLang",
  "imageSizes",
  "imageSrcSet",
  "inputMode",
  "itemID",
  "itemProp",
  "itemRef",
  "itemType",
  "keyParams",
  "keyType",
  "marginHeight",
  "marginWidth",
  "mediaGroup",
  "radioGroup",
  "referrerPolicy",
  "srcDoc",
  "srcLang",
  "srcSet",
  "useMap",
)

# CSS properties where a bare number is not a pixel length. A `px` suffix on
# these is kept, since stripping it would change the rendered value.
STYLE_KEEP_PX: FrozenSet[str] = frozenset(
  {
    "animation-iteration-count",
    "aspect-ratio",
    "border-image-outset",
    "border-image-slice",
    "border-image-width",
    "box-flex",
    "box-flex-group",
    "box-ordinal-group",
    "column-count",
    "columns",
    "fill-opacity",
    "flex",
    "flex-grow",
    "flex-negative",
    "flex-order",
    "flex-positive",
    "flex-shrink",
    "flood-opacity",
    "font-weight",
    "grid-area",
    "grid-column",
    "grid-column-end",
    "grid-column-span",
    "grid-column-start",
    "grid-row",
    "grid-row-end",
    "grid-row-span",
    "grid-row-start",
    "line-clamp",
    "line-height",
    "opacity",
    "order",
    "orphans",
    "stop-opacity",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "tab-size",
    "widows",
    "z-index",
    "zoom",
  }
)


def _lowercase_index(names: Tuple[str, ...]) -> Dict[str, str]:
  return {name.lower(): name for name in names}


EVENT_HANDLER_INDEX = _lowercase_index(EVENT_HANDLER_ATTRIBUTES)
BOOLEAN_INDEX = _lowercase_index(BOOLEAN_ATTRIBUTES)
NUMBER_INDEX = _lowercase_index(NUMBER_ATTRIBUTES)
MIXED_CASE_INDEX = _lowercase_index(MIXED_CASE_ATTRIBUTES)
SVG_BOOLEAN_SET: FrozenSet[str] = frozenset(SVG_BOOLEAN_ATTRIBUTES)
