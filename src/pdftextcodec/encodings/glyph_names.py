# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name vectors for the predefined simple-font encodings.

Each vector maps a character code to the Adobe glyph name assigned to it by
PDF 32000-1:2008, Annex D. Codes absent from a vector are undefined in that
encoding.
"""


def _names(start: int, names: str) -> dict[int, str]:
    """Assigns whitespace-separated glyph names to consecutive codes.

    A ``-`` placeholder skips a code without assigning a name.
    """
    return {
        start + offset: name
        for offset, name in enumerate(names.split())
        if name != "-"
    }


_LETTERS_UPPER = " ".join(chr(c) for c in range(ord("A"), ord("Z") + 1))
_LETTERS_LOWER = " ".join(chr(c) for c in range(ord("a"), ord("z") + 1))

# Printable ASCII (0x20-0x7E) as used by WinAnsi, MacRoman and PDFDoc
_ASCII = _names(
    0x20,
    "space exclam quotedbl numbersign dollar percent ampersand quotesingle "
    "parenleft parenright asterisk plus comma hyphen period slash "
    "zero one two three four five six seven eight nine "
    "colon semicolon less equal greater question at "
    f"{_LETTERS_UPPER} "
    "bracketleft backslash bracketright asciicircum underscore grave "
    f"{_LETTERS_LOWER} "
    "braceleft bar braceright asciitilde",
)

# ISO Latin-1 upper half (0xA1-0xFF)
_LATIN1_UPPER = _names(
    0xA1,
    "exclamdown cent sterling currency yen brokenbar section dieresis "
    "copyright ordfeminine guillemotleft logicalnot hyphen registered macron "
    "degree plusminus twosuperior threesuperior acute mu paragraph "
    "periodcentered cedilla onesuperior ordmasculine guillemotright "
    "onequarter onehalf threequarters questiondown "
    "Agrave Aacute Acircumflex Atilde Adieresis Aring AE Ccedilla "
    "Egrave Eacute Ecircumflex Edieresis Igrave Iacute Icircumflex Idieresis "
    "Eth Ntilde Ograve Oacute Ocircumflex Otilde Odieresis multiply "
    "Oslash Ugrave Uacute Ucircumflex Udieresis Yacute Thorn germandbls "
    "agrave aacute acircumflex atilde adieresis aring ae ccedilla "
    "egrave eacute ecircumflex edieresis igrave iacute icircumflex idieresis "
    "eth ntilde ograve oacute ocircumflex otilde odieresis divide "
    "oslash ugrave uacute ucircumflex udieresis yacute thorn ydieresis",
)

STANDARD_ENCODING_NAMES: dict[int, str] = {
    **_ASCII,
    0x27: "quoteright",
    0x60: "quoteleft",
    **_names(
        0xA1,
        "exclamdown cent sterling fraction yen florin section currency "
        "quotesingle quotedblleft guillemotleft guilsinglleft guilsinglright "
        "fi fl - endash dagger daggerdbl periodcentered - paragraph bullet "
        "quotesinglbase quotedblbase quotedblright guillemotright ellipsis "
        "perthousand - questiondown - grave acute circumflex tilde macron "
        "breve dotaccent dieresis - ring cedilla - hungarumlaut ogonek caron "
        "emdash",
    ),
    0xE1: "AE",
    0xE3: "ordfeminine",
    **_names(0xE8, "Lslash Oslash OE ordmasculine"),
    0xF1: "ae",
    0xF5: "dotlessi",
    **_names(0xF8, "lslash oslash oe germandbls"),
}

WIN_ANSI_ENCODING_NAMES: dict[int, str] = {
    **_ASCII,
    **_names(
        0x80,
        "Euro - quotesinglbase florin quotedblbase ellipsis dagger daggerdbl "
        "circumflex perthousand Scaron guilsinglleft OE - Zcaron - "
        "- quoteleft quoteright quotedblleft quotedblright bullet endash "
        "emdash tilde trademark scaron guilsinglright oe - zcaron Ydieresis "
        "space",
    ),
    **_LATIN1_UPPER,
}

MAC_ROMAN_ENCODING_NAMES: dict[int, str] = {
    **_ASCII,
    **_names(
        0x80,
        "Adieresis Aring Ccedilla Eacute Ntilde Odieresis Udieresis aacute "
        "agrave acircumflex adieresis atilde aring ccedilla eacute egrave "
        "ecircumflex edieresis iacute igrave icircumflex idieresis ntilde "
        "oacute ograve ocircumflex odieresis otilde uacute ugrave ucircumflex "
        "udieresis dagger degree cent sterling section bullet paragraph "
        "germandbls registered copyright trademark acute dieresis - AE Oslash "
        "- plusminus - - yen mu - - - - - ordfeminine ordmasculine - ae oslash "
        "questiondown exclamdown logicalnot - florin - - guillemotleft "
        "guillemotright ellipsis space Agrave Atilde Otilde OE oe "
        "endash emdash quotedblleft quotedblright quoteleft quoteright divide "
        "- ydieresis Ydieresis fraction currency guilsinglleft guilsinglright "
        "fi fl daggerdbl periodcentered quotesinglbase quotedblbase "
        "perthousand Acircumflex Ecircumflex Aacute Edieresis Egrave Iacute "
        "Icircumflex Idieresis Igrave Oacute Ocircumflex - Ograve Uacute "
        "Ucircumflex Ugrave dotlessi circumflex tilde macron breve dotaccent "
        "ring cedilla hungarumlaut ogonek caron",
    ),
}

MAC_EXPERT_ENCODING_NAMES: dict[int, str] = _names(
    0x20,
    "space exclamsmall Hungarumlautsmall centoldstyle dollaroldstyle "
    "dollarsuperior ampersandsmall Acutesmall parenleftsuperior "
    "parenrightsuperior twodotenleader onedotenleader comma hyphen period "
    "fraction zerooldstyle oneoldstyle twooldstyle threeoldstyle "
    "fouroldstyle fiveoldstyle sixoldstyle sevenoldstyle eightoldstyle "
    "nineoldstyle colon semicolon - threequartersemdash - questionsmall "
    "- - - - Ethsmall - - onequarter onehalf threequarters oneeighth "
    "threeeighths fiveeighths seveneighths onethird twothirds - - - - - - "
    "ff fi fl ffi ffl parenleftinferior - parenrightinferior Circumflexsmall "
    "hypheninferior Gravesmall Asmall Bsmall Csmall Dsmall Esmall Fsmall "
    "Gsmall Hsmall Ismall Jsmall Ksmall Lsmall Msmall Nsmall Osmall Psmall "
    "Qsmall Rsmall Ssmall Tsmall Usmall Vsmall Wsmall Xsmall Ysmall Zsmall "
    "colonmonetary onefitted rupiah Tildesmall - - asuperior centsuperior "
    "- - - - Aacutesmall Agravesmall Acircumflexsmall Adieresissmall "
    "Atildesmall Aringsmall Ccedillasmall Eacutesmall Egravesmall "
    "Ecircumflexsmall Edieresissmall Iacutesmall Igravesmall "
    "Icircumflexsmall Idieresissmall Ntildesmall Oacutesmall Ogravesmall "
    "Ocircumflexsmall Odieresissmall Otildesmall Uacutesmall Ugravesmall "
    "Ucircumflexsmall Udieresissmall - eightsuperior fourinferior "
    "threeinferior sixinferior eightinferior seveninferior Scaronsmall - "
    "centinferior twoinferior - Dieresissmall - Caronsmall osuperior "
    "fiveinferior - commainferior periodinferior Yacutesmall - "
    "dollarinferior - - Thornsmall - nineinferior zeroinferior Zcaronsmall "
    "AEsmall Oslashsmall questiondownsmall oneinferior Lslashsmall "
    "- - - - - - Cedillasmall - - - - - OEsmall figuredash hyphensuperior "
    "- - - - exclamdownsmall - Ydieresissmall - onesuperior twosuperior "
    "threesuperior foursuperior fivesuperior sixsuperior sevensuperior "
    "ninesuperior zerosuperior - esuperior rsuperior tsuperior - - "
    "isuperior ssuperior dsuperior - - - - - lsuperior Ogoneksmall "
    "Brevesmall Macronsmall bsuperior nsuperior msuperior commasuperior "
    "periodsuperior Dotaccentsmall Ringsmall",
)

PDF_DOC_ENCODING_NAMES: dict[int, str] = {
    0x09: "uni0009",
    0x0A: "uni000A",
    0x0D: "uni000D",
    **_names(
        0x18, "breve caron circumflex dotaccent hungarumlaut ogonek ring tilde"
    ),
    **_ASCII,
    **_names(
        0x80,
        "bullet dagger daggerdbl ellipsis emdash endash florin fraction "
        "guilsinglleft guilsinglright minus perthousand quotedblbase "
        "quotedblleft quotedblright quoteleft quoteright quotesinglbase "
        "trademark fi fl Lslash OE Scaron Ydieresis Zcaron dotlessi lslash oe "
        "scaron zcaron - Euro",
    ),
    **{code: name for code, name in _LATIN1_UPPER.items() if code != 0xAD},
}

SYMBOL_ENCODING_NAMES: dict[int, str] = {
    **_names(
        0x20,
        "space exclam universal numbersign existential percent ampersand "
        "suchthat parenleft parenright asteriskmath plus comma minus period "
        "slash zero one two three four five six seven eight nine colon "
        "semicolon less equal greater question congruent "
        "Alpha Beta Chi Delta Epsilon Phi Gamma Eta Iota theta1 Kappa Lambda "
        "Mu Nu Omicron Pi Theta Rho Sigma Tau Upsilon sigma1 Omega Xi Psi Zeta "
        "bracketleft therefore bracketright perpendicular underscore radicalex "
        "alpha beta chi delta epsilon phi gamma eta iota phi1 kappa lambda "
        "mu nu omicron pi theta rho sigma tau upsilon omega1 omega xi psi zeta "
        "braceleft bar braceright similar",
    ),
    **_names(
        0xA0,
        "Euro Upsilon1 minute lessequal fraction infinity florin club diamond "
        "heart spade arrowboth arrowleft arrowup arrowright arrowdown "
        "degree plusminus second greaterequal multiply proportional "
        "partialdiff bullet divide notequal equivalence approxequal ellipsis "
        "arrowvertex arrowhorizex carriagereturn "
        "aleph Ifraktur Rfraktur weierstrass circlemultiply circleplus "
        "emptyset intersection union propersuperset reflexsuperset notsubset "
        "propersubset reflexsubset element notelement "
        "angle gradient registerserif copyrightserif trademarkserif product "
        "radical dotmath logicalnot logicaland logicalor arrowdblboth "
        "arrowdblleft arrowdblup arrowdblright arrowdbldown "
        "lozenge angleleft registersans copyrightsans trademarksans summation "
        "parenlefttp parenleftex parenleftbt bracketlefttp bracketleftex "
        "bracketleftbt bracelefttp braceleftmid braceleftbt braceex "
        "- angleright integral integraltp integralex integralbt parenrighttp "
        "parenrightex parenrightbt bracketrighttp bracketrightex "
        "bracketrightbt bracerighttp bracerightmid bracerightbt",
    ),
}

ZAPFDINGBATS_ENCODING_NAMES: dict[int, str] = {
    **_names(
        0x20,
        "space a1 a2 a202 a3 a4 a5 a119 a118 a117 a11 a12 a13 a14 a15 a16 "
        "a105 a17 a18 a19 a20 a21 a22 a23 a24 a25 a26 a27 a28 a6 a7 a8 a9 a10",
    ),
    **{0x42 + i: f"a{29 + i}" for i in range(46)},
    **_names(
        0x70,
        "a203 a75 a204 a76 a77 a78 a79 a81 a82 a83 a84 a97 a98 a99 a100 - "
        "a89 a90 a93 a94 a91 a92 a205 a85 a206 a86 a87 a88 a95 a96",
    ),
    **_names(
        0xA1,
        "a101 a102 a103 a104 a106 a107 a108 a112 a111 a110 a109",
    ),
    **{0xAC + i: f"a{120 + i}" for i in range(42)},
    **_names(
        0xD6,
        "a163 a164 a196 a165 a192 a166 a167 a168 a169 a170 a171 a172 a173 "
        "a162 a174 a175 a176 a177 a178 a179 a193 a180 a199 a181 a200 a182 - "
        "a201 a183 a184 a197 a185 a194 a198 a186 a195 a187 a188 a189 a190 "
        "a191",
    ),
}
