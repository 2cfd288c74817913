"""Serializer lookup tables

Fixed element and attribute sets used by the serializer. Sets are frozen so the
tables cannot drift at runtime; the name-correction tables map the lowercased
names an HTML parser produces to their canonical SVG/MathML spelling.

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/parsing.html#parsing-main-inforeign
"""

# Elements that never get a closing tag in HTML mode. Includes the legacy
# names (basefont, command, frame, isindex, keygen) that older HTML parsers
# still emit.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "br",
        "col",
        "command",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "isindex",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Raw text containers whose text children are written out unescaped in HTML mode
UNENCODED_ELEMENTS = frozenset(
    {
        "style",
        "script",
        "xmp",
        "iframe",
        "noembed",
        "noframes",
        "plaintext",
        "noscript",
    }
)

# Elements that switch an HTML document into foreign content
FOREIGN_ROOT_ELEMENTS = frozenset({"svg", "math"})

# MathML text integration points, the MathML annotation-xml element and the SVG
# HTML integration points. Children of these go back to HTML serialization.
# Names are compared after case correction, hence "foreignObject".
FOREIGN_INTEGRATION_POINTS = frozenset(
    {
        "mi",
        "mo",
        "mn",
        "ms",
        "mtext",
        "annotation-xml",
        "foreignObject",
        "desc",
        "title",
    }
)

SVG_CASE_SENSITIVE_ELEMENTS = {
    "altglyph": "altGlyph",
    "altglyphdef": "altGlyphDef",
    "altglyphitem": "altGlyphItem",
    "animatecolor": "animateColor",
    "animatemotion": "animateMotion",
    "animatetransform": "animateTransform",
    "clippath": "clipPath",
    "feblend": "feBlend",
    "fecolormatrix": "feColorMatrix",
    "fecomponenttransfer": "feComponentTransfer",
    "fecomposite": "feComposite",
    "feconvolvematrix": "feConvolveMatrix",
    "fediffuselighting": "feDiffuseLighting",
    "fedisplacementmap": "feDisplacementMap",
    "fedistantlight": "feDistantLight",
    "fedropshadow": "feDropShadow",
    "feflood": "feFlood",
    "fefunca": "feFuncA",
    "fefuncb": "feFuncB",
    "fefuncg": "feFuncG",
    "fefuncr": "feFuncR",
    "fegaussianblur": "feGaussianBlur",
    "feimage": "feImage",
    "femerge": "feMerge",
    "femergenode": "feMergeNode",
    "femorphology": "feMorphology",
    "feoffset": "feOffset",
    "fepointlight": "fePointLight",
    "fespecularlighting": "feSpecularLighting",
    "fespotlight": "feSpotLight",
    "fetile": "feTile",
    "feturbulence": "feTurbulence",
    "foreignobject": "foreignObject",
    "glyphref": "glyphRef",
    "lineargradient": "linearGradient",
    "radialgradient": "radialGradient",
    "textpath": "textPath",
}

# SVG attributes that should have their case restored
SVG_CASE_SENSITIVE_ATTRIBUTES = {
    "attributename": "attributeName",
    "attributetype": "attributeType",
    "basefrequency": "baseFrequency",
    "baseprofile": "baseProfile",
    "calcmode": "calcMode",
    "clippathunits": "clipPathUnits",
    "diffuseconstant": "diffuseConstant",
    "edgemode": "edgeMode",
    "filterunits": "filterUnits",
    "glyphref": "glyphRef",
    "gradienttransform": "gradientTransform",
    "gradientunits": "gradientUnits",
    "kernelmatrix": "kernelMatrix",
    "kernelunitlength": "kernelUnitLength",
    "keypoints": "keyPoints",
    "keysplines": "keySplines",
    "keytimes": "keyTimes",
    "lengthadjust": "lengthAdjust",
    "limitingconeangle": "limitingConeAngle",
    "markerheight": "markerHeight",
    "markerunits": "markerUnits",
    "markerwidth": "markerWidth",
    "maskcontentunits": "maskContentUnits",
    "maskunits": "maskUnits",
    "numoctaves": "numOctaves",
    "pathlength": "pathLength",
    "patterncontentunits": "patternContentUnits",
    "patterntransform": "patternTransform",
    "patternunits": "patternUnits",
    "pointsatx": "pointsAtX",
    "pointsaty": "pointsAtY",
    "pointsatz": "pointsAtZ",
    "preservealpha": "preserveAlpha",
    "preserveaspectratio": "preserveAspectRatio",
    "primitiveunits": "primitiveUnits",
    "refx": "refX",
    "refy": "refY",
    "repeatcount": "repeatCount",
    "repeatdur": "repeatDur",
    "requiredextensions": "requiredExtensions",
    "requiredfeatures": "requiredFeatures",
    "specularconstant": "specularConstant",
    "specularexponent": "specularExponent",
    "spreadmethod": "spreadMethod",
    "startoffset": "startOffset",
    "stddeviation": "stdDeviation",
    "stitchtiles": "stitchTiles",
    "surfacescale": "surfaceScale",
    "systemlanguage": "systemLanguage",
    "tablevalues": "tableValues",
    "targetx": "targetX",
    "targety": "targetY",
    "textlength": "textLength",
    "viewbox": "viewBox",
    "viewtarget": "viewTarget",
    "xchannelselector": "xChannelSelector",
    "ychannelselector": "yChannelSelector",
    "zoomandpan": "zoomAndPan",
}

MATHML_CASE_SENSITIVE_ATTRIBUTES = {
    "definitionurl": "definitionURL",
}

# Namespaced attributes adjusted by the parser: name -> (prefix, local name).
# Their serialized spelling is the qualified name itself.
FOREIGN_ATTRIBUTE_ADJUSTMENTS = {
    "xlink:actuate": ("xlink", "actuate"),
    "xlink:arcrole": ("xlink", "arcrole"),
    "xlink:href": ("xlink", "href"),
    "xlink:role": ("xlink", "role"),
    "xlink:show": ("xlink", "show"),
    "xlink:title": ("xlink", "title"),
    "xlink:type": ("xlink", "type"),
    "xml:lang": ("xml", "lang"),
    "xml:space": ("xml", "space"),
    "xmlns": (None, "xmlns"),
    "xmlns:xlink": ("xmlns", "xlink"),
}

# Merged lookups used while serializing foreign content
FOREIGN_ELEMENT_NAMES = dict(SVG_CASE_SENSITIVE_ELEMENTS)

FOREIGN_ATTRIBUTE_NAMES = {
    **SVG_CASE_SENSITIVE_ATTRIBUTES,
    **MATHML_CASE_SENSITIVE_ATTRIBUTES,
    **{name: name for name in FOREIGN_ATTRIBUTE_ADJUSTMENTS},
}
