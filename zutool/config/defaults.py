"""Static lookup tables: prefecture codes, Otenki ASP cities, weather symbols."""

from types import MappingProxyType

# Prefecture names (kanji and katakana) to two-digit area codes.
# Kyoto (26) is not served by the pain status endpoint.
AREA_CODE_MAP = MappingProxyType({
    "北海道": "01", "ホッカイドウ": "01",
    "青森": "02", "アオモリ": "02",
    "岩手": "03", "イワテ": "03",
    "宮城": "04", "ミヤギ": "04",
    "秋田": "05", "アキタ": "05",
    "山形": "06", "ヤマガタ": "06",
    "福島": "07", "フクシマ": "07",
    "茨城": "08", "イバラキ": "08",
    "栃木": "09", "トチギ": "09",
    "群馬": "10", "グンマ": "10",
    "埼玉": "11", "サイタマ": "11",
    "千葉": "12", "チバ": "12",
    "東京": "13", "トウキョウ": "13",
    "神奈川": "14", "カナガワ": "14",
    "新潟": "15", "ニイガタ": "15",
    "富山": "16", "トヤマ": "16",
    "石川": "17", "イシカワ": "17",
    "福井": "18", "フクイ": "18",
    "山梨": "19", "ヤマナシ": "19",
    "長野": "20", "ナガノ": "20",
    "岐阜": "21", "ギフ": "21",
    "静岡": "22", "シズオカ": "22",
    "愛知": "23", "アイチ": "23",
    "三重": "24", "ミエ": "24",
    "滋賀": "25", "シガ": "25",
    "大阪": "27", "オオサカ": "27",
    "兵庫": "28", "ヒョウゴ": "28",
    "奈良": "29", "ナラ": "29",
    "和歌山": "30", "ワカヤマ": "30",
    "鳥取": "31", "トットリ": "31",
    "島根": "32", "シマネ": "32",
    "岡山": "33", "オカヤマ": "33",
    "広島": "34", "ヒロシマ": "34",
    "山口": "35", "ヤマグチ": "35",
    "徳島": "36", "トクシマ": "36",
    "香川": "37", "カガワ": "37",
    "愛媛": "38", "エヒメ": "38",
    "高知": "39", "コウチ": "39",
    "福岡": "40", "フクオカ": "40",
    "佐賀": "41", "サガ": "41",
    "長崎": "42", "ナガサキ": "42",
    "熊本": "43", "クマモト": "43",
    "大分": "44", "オオイタ": "44",
    "宮崎": "45", "ミヤザキ": "45",
    "鹿児島": "46", "カゴシマ": "46",
    "沖縄": "47", "オキナワ": "47",
})

# City codes known to work with the Otenki ASP getElements endpoint.
CONFIRMED_OTENKI_CITIES = MappingProxyType({
    "01101": "札幌",
    "04101": "仙台",
    "13101": "東京",
    "15103": "新潟",
    "17201": "金沢",
    "23106": "名古屋",
    "27128": "大阪",
    "34101": "広島",
    "39201": "高知",
    "40133": "福岡",
    "47201": "那覇",
})

# Weather code hundreds digit -> display symbol
WEATHER_SYMBOLS = MappingProxyType({
    100: "☀",  # clear
    200: "☁",  # cloudy
    300: "☔",  # rainy
    400: "🌨",  # snowy
})

UNKNOWN_SYMBOL = "?"
