# mobile_detect/rules.py

import re
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Patterns are regex fragments; the matcher adds the (?is) flags.
# Dict order is significant: it is the order rules are consulted in.

PHONE_DEVICES: Dict[str, str] = {
    "iPhone": r"\biPhone\b|\biPod\b",
    "BlackBerry": r"BlackBerry|\bBB10\b|rim[0-9]+",
    "HTC": (
        r"HTC|HTC.*(Sensation|Evo|Vision|Explorer|6800|8100|8900|A7272|S510e|C110e|Legend|Desire|T8282)"
        r"|APX515CKT|Qtek9090|APA9292KT|HD_mini|Sensation.*Z710e|PG86100|Z715e|Desire.*(A8181|HD)"
        r"|ADR6200|ADR6400L|ADR6425|001HT|Inspire 4G|Android.*\bEVO\b|T-Mobile G1|Z520m"
    ),
    "Nexus": r"Nexus One|Nexus S|Galaxy.*Nexus|Android.*Nexus.*Mobile|Nexus 4|Nexus 5|Nexus 6",
    "Dell": (
        r"Dell.*Streak|Dell.*Aero|Dell.*Venue|DELL.*Venue Pro|Dell Flash|Dell Smoke|Dell Mini 3iX"
        r"|XCD28|XCD35|\b001DL\b|\b101DL\b|\bGS01\b"
    ),
    "Motorola": (
        r"Motorola|DROIDX|DROID BIONIC|\bDroid\b.*Build|Android.*Xoom|HRI39|MOT-|A1260|A1680|A555"
        r"|A853|A855|A953|A955|A956|Motorola.*ELECTRIFY|Motorola.*i1|i867|i940|MB200|MB300|MB501"
        r"|MB502|MB508|MB511|MB520|MB525|MB526|MB611|MB612|MB632|MB810|MB855|MB860|MB861|MB865"
        r"|MB870|ME501|ME502|ME511|ME525|ME600|ME632|ME722|ME811|ME860|ME863|ME865|MT620|MT710"
        r"|MT716|MT720|MT810|MT870|MT917|Motorola.*TITANIUM|WX435|WX445|XT300|XT301|XT311|XT316"
        r"|XT317|XT319|XT320|XT390|XT502|XT530|XT531|XT532|XT535|XT603|XT610|XT611|XT615|XT681"
        r"|XT701|XT702|XT711|XT720|XT800|XT806|XT860|XT862|XT875|XT882|XT883|XT894|XT901|XT907"
        r"|XT909|XT910|XT912|XT928|XT926|XT915|XT919|XT925|XT1021|\bMoto E\b"
    ),
    "Samsung": (
        r"Samsung|SM-G9250|GT-19300|SGH-I337|BGT-S5230|GT-B2100|GT-B2700|GT-B2710|GT-B3210"
        r"|GT-B3310|GT-B3410|GT-B3730|GT-B3740|GT-B5510|GT-B5512|GT-B5722|GT-B6520|GT-B7300"
        r"|GT-B7320|GT-B7330|GT-B7350|GT-B7510|GT-B7722|GT-B7800|GT-C3010|GT-C3011|GT-C3060"
        r"|GT-C3200|GT-C3212|GT-C3212I|GT-C3262|GT-C3222|GT-C3300|GT-C3300K|GT-C3303|GT-C3303K"
        r"|GT-C3310|GT-C3322|GT-C3330|GT-C3350|GT-C3500|GT-C3510|GT-C3530|GT-C3630|GT-C3780"
        r"|GT-C5010|GT-C5212|GT-C6620|GT-C6625|GT-C6712|GT-E1050|GT-E1070|GT-E1075|GT-E1080"
        r"|GT-E1081|GT-E1085|GT-E1087|GT-E1100|GT-E1107|GT-E1110|GT-E1120|GT-E1125|GT-E1130"
        r"|GT-E1160|GT-E1170|GT-E1175|GT-E1180|GT-E1182|GT-E1200|GT-E1210|GT-E1225|GT-E1230"
        r"|GT-E1390|GT-E2100|GT-E2120|GT-E2121|GT-E2152|GT-E2220|GT-E2222|GT-E2230|GT-E2232"
        r"|GT-E2250|GT-E2370|GT-E2550|GT-E2652|GT-E3210|GT-E3213|GT-I5500|GT-I5503|GT-I5700"
        r"|GT-I5800|GT-I5801|GT-I6410|GT-I6420|GT-I7110|GT-I7410|GT-I7500|GT-I8000|GT-I8150"
        r"|GT-I8160|GT-I8190|GT-I8320|GT-I8330|GT-I8350|GT-I8530|GT-I8700|GT-I8703|GT-I8910"
        r"|GT-I9000|GT-I9001|GT-I9003|GT-I9010|GT-I9020|GT-I9023|GT-I9070|GT-I9082|GT-I9100"
        r"|GT-I9103|GT-I9220|GT-I9250|GT-I9300|GT-I9305|GT-I9500|GT-I9505|GT-M3510|GT-M5650"
        r"|GT-M7500|GT-M7600|GT-M7603|GT-M8800|GT-M8910|GT-N7000|GT-S3110|GT-S3310|GT-S3350"
        r"|GT-S3353|GT-S3370|GT-S3650|GT-S3653|GT-S3770|GT-S3850|GT-S5210|GT-S5220|GT-S5229"
        r"|GT-S5230|GT-S5233|GT-S5250|GT-S5253|GT-S5260|GT-S5263|GT-S5270|GT-S5300|GT-S5330"
        r"|GT-S5350|GT-S5360|GT-S5363|GT-S5369|GT-S5380|GT-S5380D|GT-S5560|GT-S5570|GT-S5600"
        r"|GT-S5603|GT-S5610|GT-S5620|GT-S5660|GT-S5670|GT-S5690|GT-S5750|GT-S5780|GT-S5830"
        r"|GT-S5839|GT-S6102|GT-S6500|GT-S7070|GT-S7200|GT-S7220|GT-S7230|GT-S7233|GT-S7250"
        r"|GT-S7500|GT-S7530|GT-S7550|GT-S7562|GT-S7710|GT-S8000|GT-S8003|GT-S8500|GT-S8530"
        r"|GT-S8600|SCH-A310|SCH-A530|SCH-A570|SCH-A610|SCH-A630|SCH-A650|SCH-A790|SCH-A795"
        r"|SCH-A850|SCH-A870|SCH-A890|SCH-A930|SCH-A950|SCH-A970|SCH-A990|SCH-I100|SCH-I110"
        r"|SCH-I400|SCH-I405|SCH-I500|SCH-I510|SCH-I515|SCH-I600|SCH-I730|SCH-I760|SCH-I770"
        r"|SCH-I830|SCH-I910|SCH-I920|SCH-I959|SCH-LC11|SCH-N150|SCH-N300|SCH-R100|SCH-R300"
        r"|SCH-R351|SCH-R400|SCH-R410|SCH-T300|SCH-U310|SCH-U320|SCH-U350|SCH-U360|SCH-U365"
        r"|SCH-U370|SCH-U380|SCH-U410|SCH-U430|SCH-U450|SCH-U460|SCH-U470|SCH-U490|SCH-U540"
        r"|SCH-U550|SCH-U620|SCH-U640|SCH-U650|SCH-U660|SCH-U700|SCH-U740|SCH-U750|SCH-U810"
        r"|SCH-U820|SCH-U900|SCH-U940|SCH-U960|SCS-26UC|SGH-A107|SGH-A117|SGH-A127|SGH-A137"
        r"|SGH-A157|SGH-A167|SGH-A177|SGH-A187|SGH-A197|SGH-A227|SGH-A237|SGH-A257|SGH-A437"
        r"|SGH-A517|SGH-A597|SGH-A637|SGH-A657|SGH-A667|SGH-A687|SGH-A697|SGH-A707|SGH-A717"
        r"|SGH-A727|SGH-A737|SGH-A747|SGH-A767|SGH-A777|SGH-A797|SGH-A817|SGH-A827|SGH-A837"
        r"|SGH-A847|SGH-A867|SGH-A877|SGH-A887|SGH-A897|SGH-A927|SGH-B100|SGH-B130|SGH-B200"
        r"|SGH-B220|SGH-C100|SGH-C110|SGH-C120|SGH-C130|SGH-C140|SGH-C160|SGH-C170|SGH-C180"
        r"|SGH-C200|SGH-C207|SGH-C210|SGH-C225|SGH-C230|SGH-C417|SGH-C450|SGH-D307|SGH-D347"
        r"|SGH-D357|SGH-D407|SGH-D415|SGH-D780|SGH-D807|SGH-D980|SGH-E105|SGH-E200|SGH-E315"
        r"|SGH-E316|SGH-E317|SGH-E335|SGH-E590|SGH-E635|SGH-E715|SGH-E890|SGH-F300|SGH-F480"
        r"|SGH-I200|SGH-I300|SGH-I320|SGH-I550|SGH-I577|SGH-I600|SGH-I607|SGH-I617|SGH-I627"
        r"|SGH-I637|SGH-I677|SGH-I700|SGH-I717|SGH-I727|SGH-i747M|SGH-I777|SGH-I780|SGH-I827"
        r"|SGH-I847|SGH-I857|SGH-I896|SGH-I897|SGH-I900|SGH-I907|SGH-I917|SGH-I927|SGH-I937"
        r"|SGH-I997|SGH-J150|SGH-J200|SGH-L170|SGH-L700|SGH-M110|SGH-M150|SGH-M200|SGH-N105"
        r"|SGH-N500|SGH-N600|SGH-N620|SGH-N625|SGH-N700|SGH-N710|SGH-P107|SGH-P207|SGH-P300"
        r"|SGH-P310|SGH-P520|SGH-P735|SGH-P777|SGH-Q105|SGH-R210|SGH-R220|SGH-R225|SGH-S105"
        r"|SGH-S307|SGH-T109|SGH-T119|SGH-T139|SGH-T209|SGH-T219|SGH-T229|SGH-T239|SGH-T249"
        r"|SGH-T259|SGH-T309|SGH-T319|SGH-T329|SGH-T339|SGH-T349|SGH-T359|SGH-T369|SGH-T379"
        r"|SGH-T409|SGH-T429|SGH-T439|SGH-T459|SGH-T469|SGH-T479|SGH-T499|SGH-T509|SGH-T519"
        r"|SGH-T539|SGH-T559|SGH-T589|SGH-T609|SGH-T619|SGH-T629|SGH-T639|SGH-T659|SGH-T669"
        r"|SGH-T679|SGH-T709|SGH-T719|SGH-T729|SGH-T739|SGH-T746|SGH-T749|SGH-T759|SGH-T769"
        r"|SGH-T809|SGH-T819|SGH-T839|SGH-T919|SGH-T929|SGH-T939|SGH-T959|SGH-T989|SGH-U100"
        r"|SGH-U200|SGH-U800|SGH-V205|SGH-V206|SGH-X100|SGH-X105|SGH-X120|SGH-X140|SGH-X426"
        r"|SGH-X427|SGH-X475|SGH-X495|SGH-X497|SGH-X507|SGH-X600|SGH-X610|SGH-X620|SGH-X630"
        r"|SGH-X700|SGH-X820|SGH-X890|SGH-Z130|SGH-Z150|SGH-Z170|SGH-ZX10|SGH-ZX20|SHW-M110"
        r"|SPH-A120|SPH-A400|SPH-A420|SPH-A460|SPH-A500|SPH-A560|SPH-A600|SPH-A620|SPH-A660"
        r"|SPH-A700|SPH-A740|SPH-A760|SPH-A790|SPH-A800|SPH-A820|SPH-A840|SPH-A880|SPH-A900"
        r"|SPH-A940|SPH-A960|SPH-D600|SPH-D700|SPH-D710|SPH-D720|SPH-I300|SPH-I325|SPH-I330"
        r"|SPH-I350|SPH-I500|SPH-I600|SPH-I700|SPH-L700|SPH-M100|SPH-M220|SPH-M240|SPH-M300"
        r"|SPH-M305|SPH-M320|SPH-M330|SPH-M350|SPH-M360|SPH-M370|SPH-M380|SPH-M510|SPH-M540"
        r"|SPH-M550|SPH-M560|SPH-M570|SPH-M580|SPH-M610|SPH-M620|SPH-M630|SPH-M800|SPH-M810"
        r"|SPH-M850|SPH-M900|SPH-M910|SPH-M920|SPH-M930|SPH-N100|SPH-N200|SPH-N240|SPH-N300"
        r"|SPH-N400|SPH-Z400|SWC-E100|SCH-i909|GT-N7100|GT-N7105|SCH-I535|SM-N900A|SGH-I317"
        r"|SGH-T999L|GT-S5360B|GT-I8262|GT-S6802|GT-S6312|GT-S6310|GT-S5312|GT-S5310|GT-I9105"
        r"|GT-I8510|GT-S6790N|SM-G7105|SM-N9005|GT-S5301|GT-I9295|GT-I9195|SM-C101|GT-S7392"
        r"|GT-S7560|GT-B7610|GT-I5510|GT-S7582|GT-S7530E|GT-I8750|SM-G9006V|SM-G9008V"
        r"|SM-G9009D|SM-G900A|SM-G900D|SM-G900F|SM-G900H|SM-G900I|SM-G900J|SM-G900K|SM-G900L"
        r"|SM-G900M|SM-G900P|SM-G900R4|SM-G900S|SM-G900T|SM-G900V|SM-G900W8|SHV-E160K"
        r"|SCH-P709|SCH-P729|SM-T2558|GT-I9205"
    ),
    "LG": (
        r"\bLG\b;|LG[- ]?(C800|C900|E400|E610|E900|E-900|F160|F180K|F180L|F180S|730|855|L160"
        r"|LS740|LS840|LS970|LU6200|MS690|MS695|MS770|MS840|MS870|MS910|P500|P700|P705|VM696"
        r"|AS680|AS695|AX840|C729|E970|GS505|272|C395|E739BK|E960|L55C|L75C|LS696|LS860|P769BK"
        r"|P350|P500|P509|P870|UN272|US730|VS840|VS950|LN272|LN510|LS670|LS855|LW690|MN270"
        r"|MN510|P509|P769|P930|UN200|UN270|UN510|UN610|US670|US740|US760|UX265|UX840|VN271"
        r"|VN530|VS660|VS700|VS740|VS750|VS910|VS920|VS930|VX9200|VX11000|AX840A|LW770|P506"
        r"|P925|P999|E612|D955|D802)"
    ),
    "Sony": (
        r"SonyST|SonyLT|SonyEricsson|SonyEricssonLT15iv|LT18i|E10i|LT28h|LT26w"
        r"|SonyEricssonMT27i|C5303|C6902|C6903|C6906|C6943|D2533"
    ),
    "Asus": r"Asus.*Galaxy|PadFone.*Mobile",
    "Micromax": (
        r"Micromax.*\b(A210|A92|A88|A72|A111|A110Q|A115|A116|A110|A90S|A26|A51|A35|A54|A25"
        r"|A27|A89|A68|A65|A57|A90)\b"
    ),
    "Palm": r"PalmSource|Palm",
    "Vertu": (
        r"Vertu|Vertu.*Ltd|Vertu.*Ascent|Vertu.*Ayxta|Vertu.*Constellation(F|Quest)?"
        r"|Vertu.*Monika|Vertu.*Signature"
    ),
    "Pantech": (
        r"PANTECH|IM-A850S|IM-A840S|IM-A830L|IM-A830K|IM-A830S|IM-A820L|IM-A810K|IM-A810S"
        r"|IM-A800S|IM-T100K|IM-A725L|IM-A780L|IM-A775C|IM-A770K|IM-A760S|IM-A750K|IM-A740S"
        r"|IM-A730S|IM-A720L|IM-A710K|IM-A690L|IM-A690S|IM-A650S|IM-A630K|IM-A600S|VEGA PTL21"
        r"|PT003|P8010|ADR910L|P6030|P6020|P9070|P4100|P9060|P5000|CDM8992|TXT8045|ADR8995"
        r"|IS11PT|P2030|P6010|P8000|PT002|IS06|CDM8999|P9050|PT001|TXT8040|P2020|P9020|P2000"
        r"|P7040|P7000|C790"
    ),
    "Fly": (
        r"IQ230|IQ444|IQ450|IQ440|IQ442|IQ441|IQ245|IQ256|IQ236|IQ255|IQ235|IQ245|IQ275"
        r"|IQ240|IQ285|IQ280|IQ270|IQ260|IQ250"
    ),
    "Wiko": (
        r"KITE 4G|HIGHWAY|GETAWAY|STAIRWAY|DARKSIDE|DARKFULL|DARKNIGHT|DARKMOON|SLIDE|WAX 4G"
        r"|RAINBOW|BLOOM|SUNSET|GOA|LENNY|BARRY|IGGY|OZZY|CINK FIVE|CINK PEAX|CINK PEAX 2"
        r"|CINK SLIM|CINK SLIM 2|CINK \+|CINK KING|CINK PEAX|CINK SLIM|SUBLIM"
    ),
    "iMobile": r"i-mobile (IQ|i-STYLE|idea|ZAA|Hitz)",
    "SimValley": (
        r"\b(SP-80|XT-930|SX-340|XT-930|SX-310|SP-360|SP60|SPT-800|SP-120|SPT-800|SP-140"
        r"|SPX-5|SPX-8|SP-100|SPX-8|SPX-12)\b"
    ),
    "Wolfgang": r"AT-B24D|AT-AS50HD|AT-AS40W|AT-AS55HD|AT-AS45q2|AT-B26D|AT-AS50Q",
    "Alcatel": r"Alcatel",
    "Nintendo": r"Nintendo 3DS",
    "Amoi": r"Amoi",
    "INQ": r"INQ",
    "GenericPhone": (
        r"Tapatalk|PDA;|SAGEM|\bmmp\b|pocket|\bpsp\b|symbian|Smartphone|smartfon|treo"
        r"|up.browser|up.link|vodafone|\bwap\b|nokia|Series40|Series60|S60|SonyEricsson"
        r"|N900|MAUI.*WAP.*Browser"
    ),
}

TABLET_DEVICES: Dict[str, str] = {
    "iPad": r"iPad|iPad.*Mobile",
    "NexusTablet": r"Android.*Nexus[\s]+(7|9|10)",
    "SamsungTablet": (
        r"SAMSUNG.*Tablet|Galaxy.*Tab|SC-01C|GT-P1000|GT-P1003|GT-P1010|GT-P3105|GT-P6210"
        r"|GT-P6800|GT-P6810|GT-P7100|GT-P7300|GT-P7310|GT-P7500|GT-P7510|SCH-I800|SCH-I815"
        r"|SCH-I905|SGH-I957|SGH-I987|SGH-T849|SGH-T859|SGH-T869|SPH-P100|GT-P3100|GT-P3108"
        r"|GT-P3110|GT-P5100|GT-P5110|GT-P6200|GT-P7320|GT-P7511|GT-N8000|GT-P8510|SGH-I497"
        r"|SPH-P500|SGH-T779|SCH-I705|SCH-I915|GT-N8013|GT-P3113|GT-P5113|GT-P8110|GT-N8010"
        r"|GT-N8005|GT-N8020|GT-P1013|GT-P6201|GT-P7501|GT-N5100|GT-N5105|GT-N5110|SHV-E140K"
        r"|SHV-E140L|SHV-E140S|SHV-E150S|SHV-E230K|SHV-E230L|SHV-E230S|SHW-M180K|SHW-M180L"
        r"|SHW-M180S|SHW-M180W|SHW-M300W|SHW-M305W|SHW-M380K|SHW-M380S|SHW-M380W|SHW-M430W"
        r"|SHW-M480K|SHW-M480S|SHW-M480W|SHW-M485W|SHW-M486W|SHW-M500W|GT-I9228|SCH-P739"
        r"|SCH-I925|GT-I9200|GT-I9205|GT-P5200|GT-P5210|GT-P5210X|SM-T311|SM-T310|SM-T310X"
        r"|SM-T210|SM-T210R|SM-T211|SM-P600|SM-P601|SM-P605|SM-P900|SM-P901|SM-T217|SM-T217A"
        r"|SM-T217S|SM-P6000|SM-T3100|SGH-I467|XE500|SM-T110|GT-P5220|GT-I9200X|GT-N5110X"
        r"|GT-N5120|SM-P905|SM-T111|SM-T2105|SM-T315|SM-T320|SM-T320X|SM-T321|SM-T520|SM-T525"
        r"|SM-T530NU|SM-T230NU|SM-T330NU|SM-T900|XE500T1C|SM-P605V|SM-P905V|SM-T337V"
        r"|SM-T537V|SM-T707V|SM-T807V|SM-P600X|SM-P900X|SM-T210X|SM-T230|SM-T230X|SM-T325"
        r"|GT-P7503|SM-T531|SM-T330|SM-T530|SM-T705C|SM-T535|SM-T331|SM-T800|SM-T700|SM-T537"
        r"|SM-T807|SM-P907A|SM-T337A|SM-T537A|SM-T707A|SM-T807A|SM-T237P|SM-T807P|SM-P607T"
        r"|SM-T217T|SM-T337T|SM-T807T"
    ),
    "Kindle": (
        r"Kindle|Silk.*Accelerated|Android.*\b(KFOT|KFTT|KFJWI|KFJWA|KFOTE|KFSOWI|KFTHWI"
        r"|KFTHWA|KFAPWI|KFAPWA|WFJWAE|KFSAWA|KFSAWI|KFASWI)\b"
    ),
    "SurfaceTablet": r"Windows NT [0-9.]+; ARM;.*(Tablet|ARMBJS)",
    "HPTablet": r"HP Slate (7|8|10)|HP ElitePad 900|hp-tablet|EliteBook.*Touch|HP 8|Slate 21|HP SlateBook 10",
    "AsusTablet": (
        r"^.*PadFone((?!Mobile).)*$|Transformer|TF101|TF101G|TF300T|TF300TG|TF300TL|TF700T"
        r"|TF700KL|TF701T|TF810C|ME171|ME301T|ME302C|ME371MG|ME370T|ME372MG|ME172V|ME173X"
        r"|ME400C|Slider SL101|\bK00F\b|\bK00C\b|\bK00E\b|\bK00L\b|TX201LA|ME176C|ME102A"
        r"|\bM80TA\b|ME372CL|ME560CG|ME372CG|ME302KL| K010 | K017 |ME572C|ME103K|ME170C"
        r"|ME171C|\bME70C\b|ME581C|ME581CL|ME8510C|ME181C"
    ),
    "BlackBerryTablet": r"PlayBook|RIM Tablet",
    "HTCtablet": r"HTC_Flyer_P512|HTC Flyer|HTC Jetstream|HTC-P715a|HTC EVO View 4G|PG41200|PG09410",
    "MotorolaTablet": (
        r"xoom|sholest|MZ615|MZ605|MZ505|MZ601|MZ602|MZ603|MZ604|MZ606|MZ607|MZ608|MZ609"
        r"|MZ615|MZ616|MZ617"
    ),
    "NookTablet": (
        r"Android.*Nook|NookColor|nook browser|BNRV200|BNRV200A|BNTV250|BNTV250A|BNTV400"
        r"|BNTV600|LogicPD Zoom2"
    ),
    "AcerTablet": (
        r"Android.*; \b(A100|A101|A110|A200|A210|A211|A500|A501|A510|A511|A700|A701|W500"
        r"|W500P|W501|W501P|W510|W511|W700|G100|G100W|B1-A71|B1-710|B1-711|A1-810|A1-811"
        r"|A1-830)\b|W3-810|\bA3-A10\b|\bA3-A11\b"
    ),
    "ToshibaTablet": (
        r"Android.*(AT100|AT105|AT200|AT205|AT270|AT275|AT300|AT305|AT1S5|AT500|AT570|AT700"
        r"|AT830)|TOSHIBA.*FOLIO"
    ),
    "LGTablet": r"\bL-06C|LG-V909|LG-V900|LG-V700|LG-V510|LG-V500|LG-V410|LG-V400|LG-VK810\b",
    "FujitsuTablet": r"Android.*\b(F-01D|F-02F|F-05E|F-10D|M532|Q572)\b",
    "PrestigioTablet": (
        r"PMP3170B|PMP3270B|PMP3470B|PMP7170B|PMP3370B|PMP3570C|PMP5870C|PMP3670B|PMP5570C"
        r"|PMP5770D|PMP3970B|PMP3870C|PMP5580C|PMP5880D|PMP5780D|PMP5588C|PMP7280C"
        r"|PMP7280C3G|PMP7280|PMP7880D|PMP5597D|PMP5597|PMP7100D|PER3464|PER3274|PER3574"
        r"|PER3884|PER5274|PER5474|PMP5097CPRO|PMP5097|PMP7380D|PMP5297C|PMP5297C_QUAD"
    ),
    "LenovoTablet": (
        r"Idea(Tab|Pad)( A1|A10| K1|)|ThinkPad([ ]+)?Tablet|Lenovo.*(S2109|S2110|S5000|S6000"
        r"|K3011|A3000|A3500|A1000|A2107|A2109|A1107|A5500|A7600|B6000|B8000|B8080)(-|)(FL|F|HV|H|)"
    ),
    "DellTablet": r"Venue 11|Venue 8|Venue 7|Dell Streak 10|Dell Streak 7",
    "YarvikTablet": (
        r"Android.*\b(TAB210|TAB211|TAB224|TAB250|TAB260|TAB264|TAB310|TAB360|TAB364|TAB410"
        r"|TAB411|TAB420|TAB424|TAB450|TAB460|TAB461|TAB464|TAB465|TAB467|TAB468|TAB07-100"
        r"|TAB07-101|TAB07-150|TAB07-151|TAB07-152|TAB07-200|TAB07-201-3G|TAB07-210|TAB07-211"
        r"|TAB07-212|TAB07-214|TAB07-220|TAB07-400|TAB07-485|TAB08-150|TAB08-200|TAB08-201-3G"
        r"|TAB08-201-30|TAB09-100|TAB09-211|TAB09-410|TAB10-150|TAB10-201|TAB10-211|TAB10-400"
        r"|TAB10-410|TAB13-201|TAB274EUK|TAB275EUK|TAB374EUK|TAB462EUK|TAB474EUK|TAB9-200)\b"
    ),
    "MedionTablet": r"Android.*\bOYO\b|LIFE.*(P9212|P9514|P9516|S9512)|LIFETAB",
    "ArnovaTablet": r"AN10G2|AN7bG3|AN7fG3|AN8G3|AN8cG3|AN7G3|AN9G3|AN7dG3|AN7dG3ST|AN7dG3ChildPad|AN10bG3|AN10bG3DT|AN9G2",
    "IntensoTablet": r"INM8002KP|INM1010FP|INM805ND|Intenso Tab|TAB1004",
    "IRUTablet": r"M702pro",
    "MegafonTablet": r"MegaFon V9|\bZTE V9\b|Android.*\bMT7A\b",
    "EbodaTablet": r"E-Boda (Supreme|Impresspeed|Izzycomm|Essential)",
    "AllViewTablet": r"Allview.*(Viva|Alldro|City|Speed|All TV|Frenzy|Quasar|Shine|TX1|AX1|AX2)",
    "ArchosTablet": (
        r"\b(101G9|80G9|A101IT)\b|Qilive 97R|Archos5|\bARCHOS (70|79|80|90|97|101|FAMILYPAD|)"
        r"(b|)(G10| Cobalt| TITANIUM(HD|)| Xenon| Neon|XSK| 2| XS 2| PLATINUM| CARBON|GAMEPAD)\b"
    ),
    "AinolTablet": r"NOVO7|NOVO8|NOVO10|Novo7Aurora|Novo7Basic|NOVO7PALADIN|novo9-Spark",
    "SonyTablet": (
        r"Sony.*Tablet|Xperia Tablet|Sony Tablet S|SO-03E|SGPT12|SGPT13|SGPT114|SGPT121"
        r"|SGPT122|SGPT123|SGPT111|SGPT112|SGPT113|SGPT131|SGPT132|SGPT133|SGPT211|SGPT212"
        r"|SGPT213|SGP311|SGP312|SGP321|EBRD1101|EBRD1102|EBRD1201|SGP351|SGP341|SGP511"
        r"|SGP512|SGP521|SGP541|SGP551|SGP621|SGP612|SOT31"
    ),
    "PhilipsTablet": r"\b(PI2010|PI3000|PI3100|PI3105|PI3110|PI3205|PI3210|PI3900|PI4010|PI7000|PI7100)\b",
    "CubeTablet": r"Android.*(K8GT|U9GT|U10GT|U16GT|U17GT|U18GT|U19GT|U20GT|U23GT|U30GT)|CUBE U8GT",
    "CobyTablet": (
        r"MID1042|MID1045|MID1125|MID1126|MID7012|MID7014|MID7015|MID7034|MID7035|MID7036"
        r"|MID7042|MID7048|MID7127|MID8042|MID8048|MID8127|MID9042|MID9740|MID9742|MID7022"
        r"|MID7010"
    ),
    "MIDTablet": (
        r"M9701|M9000|M9100|M806|M1052|M806|T703|MID701|MID713|MID710|MID727|MID760|MID830"
        r"|MID728|MID933|MID125|MID810|MID732|MID120|MID930|MID800|MID731|MID900|MID100"
        r"|MID820|MID735|MID980|MID130|MID833|MID737|MID960|MID135|MID860|MID736|MID140"
        r"|MID930|MID835|MID733|MID4X10"
    ),
    "MSITablet": (
        r"MSI \b(Primo 73K|Primo 73L|Primo 81L|Primo 77|Primo 93|Primo 75|Primo 76|Primo 73"
        r"|Primo 81|Primo 91|Primo 90|Enjoy 71|Enjoy 7|Enjoy 10)\b"
    ),
    "SMiTTablet": r"Android.*(\bMID\b|MID-560|MTV-T1200|MTV-PND531|MTV-P1101|MTV-PND530)",
    "RockChipTablet": r"Android.*(RK2818|RK2808A|RK2918|RK3066)|RK2738|RK2808A",
    "FlyTablet": r"IQ310|Fly Vision",
    "bqTablet": (
        r"(bq)?.*(Elcano|Curie|Edison|Maxwell|Kepler|Pascal|Tesla|Hypatia|Platon|Newton"
        r"|Livingstone|Cervantes|Avant|Aquaris E10)|Maxwell.*Lite|Maxwell.*Plus"
    ),
    "HuaweiTablet": r"MediaPad|MediaPad 7 Youth|IDEOS S7|S7-201c|S7-202u|S7-101|S7-103|S7-104|S7-105|S7-106|S7-201|S7-Slim",
    "NecTablet": r"\bN-06D|\bN-08D",
    "PantechTablet": r"Pantech.*P4100",
    "BronchoTablet": r"Broncho.*(N701|N708|N802|a710)",
    "VersusTablet": r"TOUCHPAD.*[78910]|\bTOUCHTAB\b",
    "ZyncTablet": r"z1000|Z99 2G|z99|z930|z999|z990|z909|Z919|z900",
    "PositivoTablet": r"TB07STA|TB10STA|TB07FTA|TB10FTA",
    "NabiTablet": r"Android.*\bNabi",
    "KoboTablet": r"Kobo Touch|\bK080\b|\bVox\b Build|\bArc\b Build",
    "DanewTablet": r"DSlide.*\b(700|701R|702|703R|704|802|970|971|972|973|974|1010|1012)\b",
    "TexetTablet": (
        r"NaviPad|TB-772A|TM-7045|TM-7055|TM-9750|TM-7016|TM-7024|TM-7026|TM-7041|TM-7043"
        r"|TM-7047|TM-8041|TM-9741|TM-9747|TM-9748|TM-9751|TM-7022|TM-7021|TM-7020|TM-7011"
        r"|TM-7010|TM-7023|TM-7025|TM-7037W|TM-7038W|TM-7027W|TM-9720|TM-9725|TM-9737W"
        r"|TM-1020|TM-9738W|TM-9740|TM-9743W|TB-807A|TB-771A|TB-727A|TB-725A|TB-719A|TB-823A"
        r"|TB-805A|TB-723A|TB-715A|TB-707A|TB-705A|TB-709A|TB-711A|TB-890HD|TB-880HD|TB-790HD"
        r"|TB-780HD|TB-770HD|TB-721HD|TB-710HD|TB-434HD|TB-860HD|TB-840HD|TB-760HD|TB-750HD"
        r"|TB-740HD|TB-730HD|TB-722HD|TB-720HD|TB-700HD|TB-500HD|TB-470HD|TB-431HD|TB-430HD"
        r"|TB-506|TB-504|TB-446|TB-436|TB-416|TB-146SE|TB-126SE"
    ),
    "PlaystationTablet": r"Playstation.*(Portable|Vita)",
    "TrekstorTablet": r"ST10416-1|VT10416-1|ST70408-1|ST702xx-1|ST702xx-2|ST80208|ST97216|ST70104-2|VT10416-2|ST10216-2A|SurfTab",
    "PyleAudioTablet": r"\b(PTBL10CEU|PTBL10C|PTBL72BC|PTBL72BCEU|PTBL7CEU|PTBL7C|PTBL92BC|PTBL92BCEU|PTBL9CEU|PTBL9CUK|PTBL9C)\b",
    "AdvanTablet": (
        r"Android.* \b(E3A|T3X|T5C|T5B|T3E|T3C|T3B|T1J|T1F|T2A|T1H|T1i|E1C|T1-E|T5-A|T4|E1-B"
        r"|T2Ci|T1-B|T1-D|O1-A|E1-A|T1-A|T3A|T4i)\b "
    ),
    "DanyTechTablet": (
        r"Genius Tab G3|Genius Tab S2|Genius Tab Q3|Genius Tab G4|Genius Tab Q4"
        r"|Genius Tab G-II|Genius TAB GII|Genius TAB GIII|Genius Tab S1"
    ),
    "GalapadTablet": r"Android.*\bG1\b",
    "MicromaxTablet": r"Funbook|Micromax.*\b(P250|P560|P360|P362|P600|P300|P350|P500|P275)\b",
    "KarbonnTablet": r"Android.*\b(A39|A37|A34|ST8|ST10|ST7|Smart Tab3|Smart Tab2)\b",
    "AllFineTablet": r"Fine7 Genius|Fine7 Shine|Fine7 Air|Fine8 Style|Fine9 More|Fine10 Joy|Fine11 Wide",
    "PROSCANTablet": (
        r"\b(PEM63|PLT1023G|PLT1041|PLT1044|PLT1044G|PLT1091|PLT4311|PLT4311PL|PLT4315"
        r"|PLT7030|PLT7033|PLT7033D|PLT7035|PLT7035D|PLT7044K|PLT7045K|PLT7045KB|PLT7071KG"
        r"|PLT7072|PLT7223G|PLT7225G|PLT7777G|PLT7810K|PLT7849G|PLT7851G|PLT7852G|PLT8015"
        r"|PLT8031|PLT8034|PLT8036|PLT8080K|PLT8082|PLT8088|PLT8223G|PLT8234G|PLT8235G"
        r"|PLT8816K|PLT9011|PLT9045K|PLT9233G|PLT9735|PLT9760G|PLT9770G)\b"
    ),
    "YONESTablet": r"BQ1078|BC1003|BC1077|RK9702|BC9730|BC9001|IT9001|BC7008|BC7010|BC708|BC728|BC7012|BC7030|BC7027|BC7026",
    "ChangJiaTablet": (
        r"TPC7102|TPC7103|TPC7105|TPC7106|TPC7107|TPC7201|TPC7203|TPC7205|TPC7210|TPC7708"
        r"|TPC7709|TPC7712|TPC7110|TPC8101|TPC8103|TPC8105|TPC8106|TPC8203|TPC8205|TPC8503"
        r"|TPC9106|TPC9701|TPC97101|TPC97103|TPC97105|TPC97106|TPC97111|TPC97113|TPC97203"
        r"|TPC97603|TPC97809|TPC97205|TPC10101|TPC10103|TPC10106|TPC10111|TPC10203|TPC10205"
        r"|TPC10503"
    ),
    "GUTablet": r"TX-A1301|TX-M9002|Q702|kf026",
    "PointOfViewTablet": (
        r"TAB-P506|TAB-navi-7-3G-M|TAB-P517|TAB-P-527|TAB-P701|TAB-P703|TAB-P721|TAB-P731N"
        r"|TAB-P741|TAB-P825|TAB-P905|TAB-P925|TAB-PR945|TAB-PL1015|TAB-P1025|TAB-PI1045"
        r"|TAB-P1325|TAB-PROTAB[0-9]+|TAB-PROTAB25|TAB-PROTAB26|TAB-PROTAB27|TAB-PROTAB26XL"
        r"|TAB-PROTAB2-IPS9|TAB-PROTAB30-IPS9|TAB-PROTAB25XXL|TAB-PROTAB26-IPS10"
        r"|TAB-PROTAB30-IPS10"
    ),
    "OvermaxTablet": r"OV-(SteelCore|NewBase|Basecore|Baseone|Exellen|Quattor|EduTab|Solution|ACTION|BasicTab|TeddyTab|MagicTab|Stream|TB-08|TB-09)",
    "HCLTablet": (
        r"HCL.*Tablet|Connect-3G-2.0|Connect-2G-2.0|ME Tablet U1|ME Tablet U2|ME Tablet G1"
        r"|ME Tablet X1|ME Tablet Y2|ME Tablet Sync"
    ),
    "DPSTablet": r"DPS Dream 9|DPS Dual 7",
    "VistureTablet": r"V97 HD|i75 3G|Visture V4( HD)?|Visture V5( HD)?|Visture V10",
    "CrestaTablet": r"CTP(-)?810|CTP(-)?818|CTP(-)?828|CTP(-)?838|CTP(-)?888|CTP(-)?978|CTP(-)?980|CTP(-)?987|CTP(-)?988|CTP(-)?989",
    "MediatekTablet": r"\bMT8125|MT8389|MT8135|MT8377\b",
    "ConcordeTablet": r"Concorde([ ]+)?Tab|ConCorde ReadMan",
    "GoCleverTablet": (
        r"GOCLEVER TAB|A7GOCLEVER|M1042|M7841|M742|R1042BK|R1041|TAB A975|TAB A7842|TAB A741"
        r"|TAB A741L|TAB M723G|TAB M721|TAB A1021|TAB I921|TAB R721|TAB I720|TAB T76|TAB R70"
        r"|TAB R76.2|TAB R106|TAB R83.2|TAB M813G|TAB I721|GCTA722|TAB I70|TAB I71|TAB S73"
        r"|TAB R73|TAB R74|TAB R93|TAB R75|TAB R76.1|TAB A73|TAB A93|TAB A93.2|TAB T72"
        r"|TAB R83|TAB R974|TAB R973|TAB A101|TAB A103|TAB A104|TAB A104.2|R105BK|M713G"
        r"|A972BK|TAB A971|TAB R974.2|TAB R104|TAB R83.3|TAB A1042"
    ),
    "ModecomTablet": (
        r"FreeTAB 9000|FreeTAB 7.4|FreeTAB 7004|FreeTAB 7800|FreeTAB 2096|FreeTAB 7.5"
        r"|FreeTAB 1014|FreeTAB 1001 |FreeTAB 8001|FreeTAB 9706|FreeTAB 9702|FreeTAB 7003"
        r"|FreeTAB 7002|FreeTAB 1002|FreeTAB 7801|FreeTAB 1331|FreeTAB 1004|FreeTAB 8002"
        r"|FreeTAB 8014|FreeTAB 9704|FreeTAB 1003"
    ),
    "VoninoTablet": (
        r"\b(Argus[ _]?S|Diamond[ _]?79HD|Emerald[ _]?78E|Luna[ _]?70C|Onyx[ _]?S|Onyx[ _]?Z"
        r"|Orin[ _]?HD|Orin[ _]?S|Otis[ _]?S|SpeedStar[ _]?S|Magnet[ _]?M9|Primus[ _]?94[ _]?3G"
        r"|Primus[ _]?94HD|Primus[ _]?QS|Android.*\bQ8\b|Sirius[ _]?EVO[ _]?QS|Sirius[ _]?QS"
        r"|Spirit[ _]?S)\b"
    ),
    "ECSTablet": r"V07OT2|TM105A|S10OT1|TR10CS1",
    "StorexTablet": r"eZee[_']?(Tab|Go)[0-9]+|TabLC7|Looney Tunes Tab",
    "VodafoneTablet": r"SmartTab([ ]+)?[0-9]+|SmartTabII10|SmartTabII7",
    "EssentielBTablet": r"Smart[ ']?TAB[ ]+?[0-9]+|Family[ ']?TAB2",
    "RossMoorTablet": r"RM-790|RM-997|RMD-878G|RMD-974R|RMT-705A|RMT-701|RME-601|RMT-501|RMT-711",
    "iMobileTablet": r"i-mobile i-note",
    "TolinoTablet": r"tolino tab [0-9.]+|tolino shine",
    "AudioSonicTablet": r"\bC-22Q|T7-QC|T-17B|T-17P\b",
    "AMPETablet": r"Android.* A78 ",
    "SkkTablet": r"Android.* (SKYPAD|PHOENIX|CYCLOPS)",
    "TecnoTablet": r"TECNO P9",
    "JXDTablet": (
        r"Android.*\b(F3000|A3300|JXD5000|JXD3000|JXD2000|JXD300B|JXD300|S5800|S7800|S602b"
        r"|S5110b|S7300|S5300|S602|S603|S5100|S5110|S601|S7100a|P3000F|P3000s|P101|P200s"
        r"|P1000m|P200m|P9100|P1000s|S6600b|S908|P1000|P300|S18|S6600|S9100)\b"
    ),
    "iJoyTablet": (
        r"Tablet (Spirit 7|Essentia|Galatea|Fusion|Onix 7|Landa|Titan|Scooby|Deox|Stella"
        r"|Themis|Argon|Unique 7|Sygnus|Hexen|Finity 7|Cream|Cream X2|Jade|Neon 7|Neron 7"
        r"|Kandy|Scape|Saphyr 7|Rebel|Biox|Rebel|Rebel 8GB|Myst|Draco 7|Myst|Tab7-004|Myst"
        r"|Tadeo Jones|Tablet Boing|Arrow|Draco Dual Cam|Aurix|Mint|Amity|Revolution|Finity 9"
        r"|Neon 9|T9w|Amity 4GB Dual Cam|Stone 4GB|Stone 8GB|Andromeda|Silken|X2|Andromeda II"
        r"|Halley|Flame|Saphyr 9,7|Touch 8|Planet|Triton|Unique 10|Hexen 10|Memphis 4GB"
        r"|Memphis 8GB|Onix 10)"
    ),
    "FX2Tablet": r"FX2 PAD7|FX2 PAD10",
    "XoroTablet": (
        r"KidsPAD 701|PAD[ ]?712|PAD[ ]?714|PAD[ ]?716|PAD[ ]?717|PAD[ ]?718|PAD[ ]?720"
        r"|PAD[ ]?721|PAD[ ]?722|PAD[ ]?790|PAD[ ]?792|PAD[ ]?900|PAD[ ]?9715D|PAD[ ]?9716DR"
        r"|PAD[ ]?9718DR|PAD[ ]?9719QR|PAD[ ]?9720QR|TelePAD1030|Telepad1032|TelePAD730"
        r"|TelePAD731|TelePAD732|TelePAD735Q|TelePAD830|TelePAD9730|TelePAD795|MegaPAD 1331"
        r"|MegaPAD 1851|MegaPAD 2151"
    ),
    "ViewsonicTablet": r"ViewPad 10pi|ViewPad 10e|ViewPad 10s|ViewPad E72|ViewPad7|ViewPad E100|ViewPad 7e|ViewSonic VB733|VB100a",
    "OdysTablet": r"LOOX|XENO10|ODYS[ -](Space|EVO|Xpress|NOON)|\bXELIO\b|Xelio10Pro|XELIO7PHONETAB|XELIO10EXTREME|XELIOPT2|NEO_QUAD10",
    "CaptivaTablet": r"CAPTIVA PAD",
    "IconbitTablet": r"NetTAB|NT-3702|NT-3702S|NT-3603P|NT-0704S|NT-3805C|NT-0806C|NT-0909T|NT-0907S|NT-0902S",
    "TeclastTablet": (
        r"T98 4G|\bP80\b|\bX90HD\b|X98 Air|X98 Air 3G|\bX89\b|P80 3G|\bX80h\b|P98 Air|\bX89HD\b"
        r"|P98 3G|\bP90HD\b|P89 3G|X98 3G|\bP70h\b|P79HD 3G|G18d 3G|\bP79HD\b|\bP89s\b|\bA88\b"
        r"|\bP10HD\b|\bP19HD\b|G18 3G|\bP78HD\b|\bA78\b|\bP75\b|G17s 3G|G17h 3G|\bP85t\b"
        r"|\bP90\b|\bP11\b|\bP98t\b|\bP98HD\b|\bG18d\b|\bP85s\b|\bP11HD\b|\bP88s\b|\bA80HD\b"
        r"|\bA80se\b|\bA10h\b|\bP89\b|\bP78s\b|\bG18\b|\bP85\b|\bA70h\b|\bA70\b|\bG17\b"
        r"|\bP18\b|\bA80s\b|\bA11s\b|\bP88HD\b|\bA80h\b|\bP76s\b|\bP76h\b|\bP98\b|\bA10HD\b"
        r"|\bP78\b|\bP88\b|\bA11\b|\bA10t\b|\bP76a\b|\bP76t\b|\bP76e\b|\bP85HD\b|\bP85a\b"
        r"|\bP86\b|\bP75HD\b|\bP76v\b|\bA12\b|\bP75a\b|\bA15\b|\bP76Ti\b|\bP81HD\b|\bA10\b"
        r"|\bT760VE\b|\bT720HD\b|\bP76\b|\bP73\b|\bP71\b|\bP72\b|\bT720SE\b|\bC520Ti\b"
        r"|\bT760\b|\bT720VE\b|T720-3GE|T720-WiFi"
    ),
    "OndaTablet": (
        r"\b(V975i|Vi30|VX530|V701|Vi60|V701s|Vi50|V801s|V719|Vx610w|VX610W|V819i|Vi10|VX580W"
        r"|Vi10|V711s|V813|V811|V820w|V820|Vi20|V711|VI30W|V712|V891w|V972|V819w|V820w|Vi60"
        r"|V820w|V711|V813s|V801|V819|V975s|V801|V819|V819|V818|V811|V712|V975m|V101w|V961w"
        r"|V812|V818|V971|V971s|V919|V989|V116w|V102w|V973|Vi40)\b[\s]+"
    ),
    "JaytechTablet": r"TPC-PA762",
    "BlaupunktTablet": r"Endeavour 800NG|Endeavour 1010",
    "DigmaTablet": r"\b(iDx10|iDx9|iDx8|iDx7|iDxD7|iDxD8|iDsQ8|iDsQ7|iDsQ8|iDsD10|iDnD7|3TS804H|iDsQ11|iDj7|iDs10)\b",
    "EvolioTablet": r"ARIA_Mini_wifi|Aria[ _]Mini|Evolio X10|Evolio X7|Evolio X8|\bEvotab\b|\bNeura\b",
    "LavaTablet": r"QPAD E704|\bIvoryS\b|E-TAB IVORY|\bE-TAB\b",
    "CelkonTablet": r"CT695|CT888|CT[\s]?910|CT7 Tab|CT9 Tab|CT3 Tab|CT2 Tab|CT1 Tab|C820|C720|\bCT-1\b",
    "WolderTablet": (
        r"miTab \b(DIAMOND|SPACE|BROOKLYN|NEO|FLY|MANHATTAN|FUNK|EVOLUTION|SKY|GOCAR|IRON"
        r"|GENIUS|POP|MINT|EPSILON|BROADWAY|JUMP|HOP|LEGEND|NEW AGE|LINE|ADVANCE|FEEL|FOLLOW"
        r"|LIKE|LINK|LIVE|THINK|FREEDOM|CHICAGO|CLEVELAND|BALTIMORE-GH|IOWA|BOSTON|SEATTLE"
        r"|PHOENIX|DALLAS|IN 101|MasterChef)\b"
    ),
    "MiTablet": r"\bMI PAD\b|\bHM NOTE 1W\b",
    "NibiruTablet": r"Nibiru M1|Nibiru Jupiter One",
    "NexoTablet": r"NEXO NOVA|NEXO 10|NEXO AVIO|NEXO FREE|NEXO GO|NEXO EVO|NEXO 3G|NEXO SMART|NEXO KIDDO|NEXO MOBI",
    "UbislateTablet": r"UbiSlate[\s]?7C",
    "PocketBookTablet": r"Pocketbook",
    "Hudl": r"Hudl HT7S3",
    "TelstraTablet": r"T-Hub2",
    "GenericTablet": (
        r"Android.*\b97D\b|Tablet(?!.*PC)|BNTV250A|MID-WCDMA|LogicPD Zoom2|\bA7EB\b|CatNova8"
        r"|A1_07|CT704|CT1002|\bM721\b|rk30sdk|\bEVOTAB\b|M758A|ET904|ALUMIUM10|Smartfren Tab"
        r"|Endeavour 1010|Tablet-PC-4|Tagi Tab|\bM6pro\b|CT1020W|arc 10HD|\bJolla\b|\bTP750\b"
    ),
}

OPERATING_SYSTEMS: Dict[str, str] = {
    "AndroidOS": r"Android",
    "BlackBerryOS": r"blackberry|\bBB10\b|rim tablet os",
    "PalmOS": r"PalmOS|avantgo|blazer|elaine|hiptop|palm|plucker|xiino",
    "SymbianOS": r"Symbian|SymbOS|Series60|Series40|SYB-[0-9]+|\bS60\b",
    "WindowsMobileOS": r"Windows CE.*(PPC|Smartphone|Mobile|[0-9]{3}x[0-9]{3})|Window Mobile|Windows Phone [0-9.]+|WCE;",
    "WindowsPhoneOS": r"Windows Phone 8.1|Windows Phone 8.0|Windows Phone OS|XBLWP7|ZuneWP7|Windows NT 6.[23]; ARM;",
    "iOS": r"\biPhone.*Mobile|\biPod|\biPad",
    "MeeGoOS": r"MeeGo",
    "MaemoOS": r"Maemo",
    "JavaOS": r"J2ME/|\bMIDP\b|\bCLDC\b",
    "webOS": r"webOS|hpwOS",
    "badaOS": r"\bBada\b",
    "BREWOS": r"BREW",
}

BROWSERS: Dict[str, str] = {
    "Chrome": r"\bCrMo\b|CriOS|Android.*Chrome/[.0-9]* (Mobile)?",
    "Dolfin": r"\bDolfin\b",
    "Opera": r"Opera.*Mini|Opera.*Mobi|Android.*Opera|Mobile.*OPR/[0-9.]+|Coast/[0-9.]+",
    "Skyfire": r"Skyfire",
    "IE": r"IEMobile|MSIEMobile",
    "Firefox": r"fennec|firefox.*maemo|(Mobile|Tablet).*Firefox|Firefox.*Mobile",
    "Bolt": r"bolt",
    "TeaShark": r"teashark",
    "Blazer": r"Blazer",
    "Safari": r"Version.*Mobile.*Safari|Safari.*Mobile|MobileSafari",
    "Tizen": r"Tizen",
    "UCBrowser": r"UC.*Browser|UCWEB",
    "baiduboxapp": r"baiduboxapp",
    "baidubrowser": r"baidubrowser",
    "DiigoBrowser": r"DiigoBrowser",
    "Puffin": r"Puffin",
    "Mercury": r"\bMercury\b",
    "ObigoBrowser": r"Obigo",
    "NetFront": r"NF-Browser",
    "GenericBrowser": (
        r"NokiaBrowser|OviBrowser|OneBrowser|TwonkyBeamBrowser|SEMC.*Browser|FlyFlow|Minimo"
        r"|NetFront|Novarra-Vision|MQQBrowser|MicroMessenger"
    ),
}


class Rules:
    """
    Immutable set of detection rules.

    Holds the four rule groups plus the combined table (phones, operating
    systems, browsers) used by the generic mobile scan. Tablets are kept out
    of the combined table and are only consulted by the tablet check.
    Every rule name also gets an integer key: its position in the order
    phones, tablets, operating systems, browsers.
    """

    def __init__(
        self,
        phone_devices: Optional[Mapping[str, str]] = None,
        tablet_devices: Optional[Mapping[str, str]] = None,
        operating_systems: Optional[Mapping[str, str]] = None,
        browsers: Optional[Mapping[str, str]] = None,
    ):
        self.phone_devices = MappingProxyType(dict(PHONE_DEVICES if phone_devices is None else phone_devices))
        self.tablet_devices = MappingProxyType(dict(TABLET_DEVICES if tablet_devices is None else tablet_devices))
        self.operating_systems = MappingProxyType(
            dict(OPERATING_SYSTEMS if operating_systems is None else operating_systems)
        )
        self.browsers = MappingProxyType(dict(BROWSERS if browsers is None else browsers))

        combined: Dict[str, str] = {}
        combined.update(self.phone_devices)
        combined.update(self.operating_systems)
        combined.update(self.browsers)
        self._mobile_detection_rules = MappingProxyType(combined)

        # Lower-cased names so isIphone, isiPhone, isiphone all resolve
        self._rules_by_lower_name = {name.lower(): pattern for name, pattern in combined.items()}

        self._key_by_name: Dict[str, int] = {}
        self._name_by_key: Dict[int, str] = {}
        for group in (self.phone_devices, self.tablet_devices, self.operating_systems, self.browsers):
            for name in group:
                if name.lower() in self._key_by_name:
                    continue
                key = len(self._name_by_key)
                self._key_by_name[name.lower()] = key
                self._name_by_key[key] = name

    def mobile_detection_rules(self) -> Mapping[str, str]:
        """Combined table consulted by the generic mobile scan"""
        return self._mobile_detection_rules

    def key(self, name: str) -> Optional[int]:
        return self._key_by_name.get(name.lower())

    def name(self, key: int) -> Optional[str]:
        return self._name_by_key.get(key)

    def names(self) -> list[str]:
        """All rule names in key order"""
        return [self._name_by_key[key] for key in sorted(self._name_by_key)]

    def rule_for_name(self, name: str) -> Optional[str]:
        return self._rules_by_lower_name.get(name.lower())

    def rule_for_key(self, key: int) -> Optional[str]:
        name = self._name_by_key.get(key)
        if name is None:
            return None
        return self.rule_for_name(name)


# Process-wide default, built once at import and shared read-only
DEFAULT_RULES = Rules()

# Integer keys of the default rules (RuleKey.IPHONE, RuleKey.IOS, ...)
RuleKey = IntEnum(
    "RuleKey",
    {re.sub(r"\W", "_", name).upper(): key for key, name in enumerate(DEFAULT_RULES.names())},
)
