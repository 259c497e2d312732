"""Authored daily readings and monthly themes for the Classic Reading Plan.

Each month is a tuple of shorthand strings, one per day of the month in a
common (non-leap) year. Themes are ascending day thresholds: the first bucket
whose upper bound is >= the day of month supplies the label, and the final
bucket (bound ``None``) catches the rest of the month.
"""

JANUARY = (
    "Gen. 1-2; Luke 1",
    "Gen. 3-5; Luke 2",
    "Gen. 6-8; Luke 3",
    "Gen. 9-11; Luke 4",
    "Gen. 12-14; Luke 5",
    "Gen. 15-17; Luke 6",
    "Gen. 18-19; Ps. 3; Luke 7",
    "Gen. 20-22; Luke 8",
    "Gen. 23-24; Luke 9",
    "Gen. 25-26; Ps. 6; Luke 10",
    "Gen. 27-28; Ps. 4; Luke 11",
    "Gen. 29-30; Luke 12",
    "Gen. 31-33; Luke 13",
    "Gen. 34-36; Luke 14",
    "Gen. 37-38; Ps. 7; Luke 15",
    "Gen. 39-41; Luke 16",
    "Gen. 42-43; Ps. 5; Luke 17",
    "Gen. 44-46; Luke 18",
    "Gen. 47-48; Ps. 10; Luke 19",
    "Gen. 49-50; Ps. 8; Luke 20",
    "Ex. 1-2; Ps. 88; Luke 21",
    "Ex. 3-5; Luke 22",
    "Ex. 6-8; Luke 23",
    "Ex. 9-11; Luke 24",
    "Ex. 12-13; Ps. 21; Acts 1",
    "Ex. 14-16; Acts 2",
    "Ex. 17-20; Acts 3",
    "Ex. 21-22; Ps. 12; Acts 4",
    "Ex. 23-24; Ps. 14; Acts 5",
    "Ex. 25-27; Acts 6",
    "Ex. 28-29; Acts 7",
)

FEBRUARY = (
    "Ex. 30-32; Acts 8",
    "Ex. 33-34; Ps. 16; Acts 9",
    "Ex. 35-36; Acts 10",
    "Ex. 37-38; Ps. 19; Acts 11",
    "Ex. 39-40; Ps. 15; Acts 12",
    "Lev. 1-3; Acts 13",
    "Lev. 4-6; Acts 14",
    "Lev. 7-9; Acts 15",
    "Lev. 10-12; Acts 16",
    "Lev. 13-14; Acts 17",
    "Lev. 15-17; Acts 18",
    "Lev. 18-19; Ps. 13; Acts 19",
    "Lev. 20-22; Acts 20",
    "Lev. 23-24; Ps. 24; Acts 21",
    "Lev. 25; Ps. 25-26; Acts 22",
    "Lev. 26-27; Acts 23",
    "Num. 1-2; Acts 24",
    "Num. 3-4; Acts 25",
    "Num. 5-6; Ps. 22; Acts 26",
    "Num. 7; Ps. 23; Acts 27",
    "Num. 8-9; Acts 28",
    "Num. 10-11; Ps. 27; Mark 1",
    "Num. 12-13; Ps. 90; Mark 2",
    "Num. 14-16; Mark 3",
    "Num. 17-18; Ps. 29; Mark 4",
    "Num. 19-20; Ps. 28; Mark 5",
    "Num. 21-23; Mark 6-7",
    "Num. 24-27; 1 Cor. 13",
)

MARCH = (
    "Num. 28-29; Mark 8",
    "Num. 30-31; Mark 9",
    "Num. 32-33; Mark 10",
    "Num. 34-36; Mark 11",
    "Deut. 1-2; Mark 12",
    "Deut. 3-4; Ps. 36; Mark 13",
    "Deut. 5-6; Ps. 43; Mark 14",
    "Deut. 7-9; Mark 15",
    "Deut. 10-12; Mark 16",
    "Deut. 13-15; Gal. 1",
    "Deut. 16-18; Ps. 38; Gal. 2",
    "Deut. 19-21; Gal. 3",
    "Deut. 22-24; Gal. 4",
    "Deut. 25-27; Gal. 5",
    "Deut. 28-29; Gal. 6",
    "Deut. 30-31; Ps. 40; 1 Cor. 1",
    "Deut. 32-34; 1 Cor. 2",
    "Josh. 1-2; Ps. 37; 1 Cor. 3",
    "Josh. 3-6; 1 Cor. 4",
    "Josh. 7-8; Ps. 69; 1 Cor. 5",
    "Josh. 9-11; 1 Cor. 6",
    "Josh. 12-14; 1 Cor. 7",
    "Josh. 15-17; 1 Cor. 8",
    "Josh. 18-20; 1 Cor. 9",
    "Josh. 21-22; Ps. 47; 1 Cor. 10",
    "Josh. 23-24; Ps. 44; 1 Cor. 11",
    "Judg. 1-3; 1 Cor. 12",
    "Judg. 4-5; Ps. 39,41; 1 Cor. 13",
    "Judg. 6-7; Ps. 52; 1 Cor. 14",
    "Judg. 8; Ps. 42; 1 Cor. 15",
    "Judg. 9-10; Ps. 49; 1 Cor. 16",
)

APRIL = (
    "Judg. 11-12; Ps. 50; 2 Cor. 1",
    "Judg. 13-16; 2 Cor. 2",
    "Judg. 17-18; Ps. 89; 2 Cor. 3",
    "Judg. 19-21; 2 Cor. 4",
    "Ruth 1-2; Ps. 53,61; 2 Cor. 5",
    "Ruth 3-4; Ps. 64-65; 2 Cor. 6",
    "1 Sam. 1-2; Ps. 66; 2 Cor. 7",
    "1 Sam. 3-5; Ps. 77; 2 Cor. 8",
    "1 Sam. 6-7; Ps. 72; 2 Cor. 9",
    "1 Sam. 8-10; 2 Cor. 10",
    "1 Sam. 11-12; 1 Chr. 1; 2 Cor. 11",
    "1 Sam. 13; 1 Chr. 2-3; 2 Cor. 12",
    "1 Sam. 14; 1 Chr. 4; 2 Cor. 13",
    "1 Sam. 15-16; 1 Chr. 5; Mt. 1",
    "1 Sam. 17; Ps. 9; Mt. 2",
    "1 Sam. 18; 1 Chr. 6; Ps. 141; Mt. 3",
    "1 Sam. 19; 1 Chr. 7; Ps. 59; Mt. 4",
    "1 Sam. 20-21; Ps. 34; Mt. 5",
    "1 Sam. 22; Ps. 17,35; Mt. 6",
    "1 Sam. 23; Ps. 31,54; Mt. 7",
    "1 Sam. 24; Ps. 57-58; 1 Chr. 8; Mt. 8",
    "1 Sam. 25-26; Ps. 63; Mt. 9",
    "1 Sam. 27; Ps. 141; 1 Chr. 9; Mt. 10",
    "1 Sam. 28-29; Ps. 109; Mt. 11",
    "1 Sam. 30-31; 1 Chr. 10; Mt. 12",
    "2 Sam. 1; Ps. 140; Mt. 13",
    "2 Sam. 2; 1 Chr. 11; Ps. 142; Mt. 14",
    "2 Sam. 3; 1 Chr. 12; Mt. 15",
    "2 Sam. 4-5; Ps. 139; Mt. 16",
    "2 Sam. 6; 1 Chr. 13; Ps. 68; Mt. 17",
)

MAY = (
    "1 Chr. 14-15; Ps. 132; Mt. 18",
    "1 Chr. 16; Ps. 106; Mt. 19",
    "2 Sam. 7; 1 Chr. 17; Ps. 2; Mt. 20",
    "2 Sam. 8-9; 1 Chr. 18-19; Mt. 21",
    "2 Sam. 10; 1 Chr. 20; Ps. 20; Mt. 22",
    "2 Sam. 11-12; Ps. 51; Mt. 23",
    "2 Sam. 13-14; Mt. 24",
    "2 Sam. 15-16; Ps. 32; Mt. 25",
    "2 Sam. 17; Ps. 71; Mt. 26",
    "2 Sam. 18; Ps. 56; Mt. 27",
    "2 Sam. 19-20; Ps. 55; Mt. 28",
    "2 Sam. 21-23; 1 Th. 1",
    "2 Sam. 24; 1 Chr. 21; Ps. 30; 1 Th. 2",
    "1 Chr. 22-24; 1 Th. 3",
    "1 Chr. 25-27; 1 Th. 4",
    "1 Ki. 1; 1 Chr. 28; Ps. 91; 1 Th. 5",
    "1 Ki. 2; 1 Chr. 29; Ps. 95; 2 Th. 1",
    "1 Ki. 3; 2 Chr. 1; Ps. 78; 2 Th. 2",
    "1 Ki. 4-5; 2 Chr. 2; Ps. 101; 2 Th. 3",
    "1 Ki. 6; 2 Chr. 3; Ps. 97; Rom. 1",
    "1 Ki. 7; 2 Chr. 4; Ps. 98; Rom. 2",
    "1 Ki. 8; 2 Chr. 5; Ps. 99; Rom. 3",
    "2 Chr. 6-7; Ps. 135; Rom. 4",
    "1 Ki. 9; 2 Chr. 8; Ps. 136; Rom. 5",
    "1 Ki. 10-11; 2 Chr. 9; Rom. 6",
    "Prov. 1-3; Rom. 7",
    "Prov. 4-6; Rom. 8",
    "Prov. 7-9; Rom. 9",
    "Prov. 10-12; Rom. 10",
    "Prov. 13-15; Rom. 11",
    "Prov. 16-18; Rom. 12",
)

JUNE = (
    "Prov. 19-21; Rom. 13",
    "Prov. 22-24; Rom. 14",
    "Prov. 25-27; Rom. 15",
    "Prov. 28-29; Ps. 60; Rom. 16",
    "Prov. 30-31; Ps. 33; Eph. 1",
    "Ecc. 1-3; Ps. 45; Eph. 2",
    "Ecc. 4-6; Ps. 18; Eph. 3",
    "Ecc. 7-9; Eph. 4",
    "Ecc. 10-12; Ps. 94; Eph. 5",
    "Song 1-4; Eph. 6",
    "Song 5-8; Phil. 1",
    "1 Ki. 12; 2 Chr. 10-11; Phil. 2",
    "1 Ki. 13-14; 2 Chr. 12; Phil. 3",
    "1 Ki. 15; 2 Chr. 13-14; Phil. 4",
    "1 Ki. 16; 2 Chr. 15-16; Col. 1",
    "1 Ki. 17-19; Col. 2",
    "1 Ki. 20-21; 2 Chr. 17; Col. 3",
    "1 Ki. 22; 2 Chr. 18-19; Col. 4",
    "2 Ki. 1-3; Ps. 82; 1 Tim. 1",
    "2 Ki. 4-5; Ps. 83; 1 Tim. 2",
    "2 Ki. 6-7; 2 Chr. 20; 1 Tim. 3",
    "2 Ki. 8-9; 2 Chr. 21; 1 Tim. 4",
    "2 Ki. 10; 2 Chr. 22-23; 1 Tim. 5",
    "2 Ki. 11-12; 2 Chr. 24; 1 Tim. 6",
    "Joel 1-3; 2 Tim. 1",
    "Jon. 1-4; 2 Tim. 2",
    "2 Ki. 13-14; 2 Chr. 25; 2 Tim. 3",
    "Amos 1-3; Ps. 80; 2 Tim. 4",
    "Amos 4-6; Ps. 86-87; Titus 1",
    "Amos 7-9; Ps. 104; Titus 2",
)

JULY = (
    "Is. 1-3; Titus 3",
    "Is. 4-5; Ps. 115-116; Jude",
    "Is. 6-7; 2 Chr. 26-27; Philem.",
    "2 Ki. 15-16; Hos. 1; Heb. 1",
    "Hos. 2-5; Heb. 2",
    "Hos. 6-9; Heb. 3",
    "Hos. 10-12; Ps. 73; Heb. 4",
    "Hos. 13-14; Ps. 100,102; Heb. 5",
    "Mic. 1-4; Heb. 6",
    "Mic. 5-7; Heb. 7",
    "Is. 8-10; Heb. 8",
    "Is. 11-14; Heb. 9",
    "Is. 15-18; Heb. 10",
    "Is. 19-21; Heb. 11",
    "Is. 22-24; Heb. 12",
    "Is. 25-28; Heb. 13",
    "Is. 29-31; Jas. 1",
    "Is. 32-35; Jas. 2",
    "2 Ki. 17; 2 Chr. 28; Ps. 46; Jas. 3",
    "2 Chr. 29-31; Jas. 4",
    "2 Ki. 18-19; 2 Chr. 32; Jas. 5",
    "Is. 36-37; Ps. 76; 1 Pet. 1",
    "2 Ki. 20; Is. 38-39; Ps. 75; 1 Pet. 2",
    "Is. 40-42; 1 Pet. 3",
    "Is. 43-45; 1 Pet. 4",
    "Is. 46-49; 1 Pet. 5",
    "Is. 50-52; Ps. 92; 2 Pet. 1",
    "Is. 53-56; 2 Pet. 2",
    "Is. 57-59; Ps. 103; 2 Pet. 3",
    "Is. 60-62; Jn. 1",
    "Is. 63-64; Ps. 107; Jn. 2",
)

AUGUST = (
    "Is. 65-66; Ps. 62; Jn. 3",
    "2 Ki. 21; 2 Chr. 33; Jn. 4",
    "Nah. 1-3; Jn. 5",
    "2 Ki. 22; 2 Chr. 34; Jn. 6",
    "2 Ki. 23; 2 Chr. 35; Jn. 7",
    "Hab. 1-3; Jn. 8",
    "Zeph. 1-3; Jn. 9",
    "Jer. 1-2; Jn. 10",
    "Jer. 3-4; Jn. 11",
    "Jer. 5-6; Jn. 12",
    "Jer. 7-9; Jn. 13",
    "Jer. 10-12; Jn. 14",
    "Jer. 13-15; Jn. 15",
    "Jer. 16-17; Ps. 96; Jn. 16",
    "Jer. 18-20; Ps. 93; Jn. 17",
    "2 Ki. 24; Jer. 22; Ps. 112; Jn. 18",
    "Jer. 23,25; Jn. 19",
    "Jer. 26,35-36; Jn. 20",
    "Jer. 45-47; Ps. 105; Jn. 21",
    "Jer. 48-49; Ps. 67; 1 Jn. 1",
    "Jer. 21,24,27; Ps. 118; 1 Jn. 2",
    "Jer. 28-30; 1 Jn. 3",
    "Jer. 31-32; 1 Jn. 4",
    "Jer. 33-34; Ps. 74; 1 Jn. 5",
    "Jer. 37-39; Ps. 79; 2 Jn.",
    "Jer. 50-51; 3 Jn.",
    "Jer. 52; Rev. 1; Ps. 143-144",
    "Ezek. 1-3; Rev. 2",
    "Ezek. 4-7; Rev. 3",
    "Ezek. 8-11; Rev. 4",
    "Ezek. 12-14; Rev. 5",
)

SEPTEMBER = (
    "Ezek. 15-16; Ps. 70; Rev. 6",
    "Ezek. 17-19; Rev. 7",
    "Ezek. 20-21; Ps. 111; Rev. 8",
    "Ezek. 22-24; Rev. 9",
    "Ezek. 25-28; Rev. 10",
    "Ezek. 29-32; Rev. 11",
    "2 Ki. 25; 2 Chr. 36; Jer. 40-41; Rev. 12",
    "Jer. 42-44; Ps. 48; Rev. 13",
    "Lam. 1-2; Obad; Rev. 14",
    "Lam. 3-5; Rev. 15",
    "Dan. 1-2; Rev. 16",
    "Dan. 3-4; Ps. 81; Rev. 17",
    "Ezek. 33-35; Rev. 18",
    "Ezek. 36-37; Ps. 110; Rev. 19",
    "Ezek. 38-39; Ps. 145; Rev. 20",
    "Ezek. 40-41; Ps. 128; Rev. 21",
    "Ezek. 42-44; Rev. 22",
    "Ezek. 45-46; Lk. 1",
    "Ezek. 47-48; Lk. 2",
    "Dan. 5-6; Ps. 130; Lk. 3",
    "Dan. 7-8; Ps. 137; Lk. 4",
    "Dan. 9-10; Ps. 123; Lk. 5",
    "Dan. 11-12; Lk. 6",
    "Ezra 1; Ps. 84-85; Lk. 7",
    "Ezra 2-3; Lk. 8",
    "Ezra 4; Ps. 113,127; Lk. 9",
    "Hag. 1-2; Ps. 129; Lk. 10",
    "Zech. 1-3; Lk. 11",
    "Zech. 4-6; Lk. 12",
    "Zech. 7-9; Lk. 13",
)

OCTOBER = (
    "Zech. 10-12; Ps. 126; Lk. 14",
    "Zech. 13-14; Ps. 147; Lk. 15",
    "Ezra 5-6; Ps. 138; Lk. 16",
    "Est. 1-2; Ps. 150; Lk. 17",
    "Est. 3-8; Lk. 18",
    "Est. 9-10; Lk. 19",
    "Ezra 7-8; Lk. 20",
    "Ezra 9-10; Ps. 131; Lk. 21",
    "Neh. 1-2; Ps. 133-134; Lk. 22",
    "Neh. 3-4; Lk. 23",
    "Neh. 5-6; Ps. 146; Lk. 24",
    "Neh. 7-8; Acts 1",
    "Neh. 9-10; Acts 2",
    "Neh. 11-12; Ps. 1; Acts 3",
    "Neh. 13; Mal. 1-2; Acts 4",
    "Mal. 3-4; Ps. 148; Acts 5",
    "Job 1-2; Acts 6-7",
    "Job 3-4; Acts 8-9",
    "Job 5; Ps. 108; Acts 10-11",
    "Job 6-8; Acts 12",
    "Job 9-10; Acts 13-14",
    "Job 11-12; Acts 15-16",
    "Job 13-14; Acts 17-18",
    "Job 15; Acts 19-20",
    "Job 16; Acts 21-23",
    "Job 17; Acts 24-26",
    "Job 18; Ps. 114; Acts 27-28",
    "Job 19; Mk. 1-2",
    "Job 20; Mk. 3-4",
    "Job 21; Mk. 5-6",
    "Job 22; Mk. 7-8",
)

NOVEMBER = (
    "Ps. 121; Mk. 9-10",
    "Job 23-24; Mk. 11-12",
    "Job 25; Mk. 13-14",
    "Job 26-27; Mk. 15-16",
    "Job 28-29; Gal. 1-2",
    "Job 30; Ps. 120; Gal. 3-4",
    "Job 31-32; Gal. 5-6",
    "Job 33; 1 Cor. 1-3",
    "Job 34; 1 Cor. 4-6",
    "Job 35-36; 1 Cor. 7-8",
    "Ps. 122; 1 Cor. 9-11",
    "Job 37-38; 1 Cor. 12",
    "Job 39-40; 1 Cor. 13-14",
    "Ps. 149; 1 Cor. 15-16",
    "Job 41-42; 2 Cor. 1-2",
    "2 Cor. 3-6",
    "2 Cor. 7-10",
    "Ps. 124; 2 Cor. 11-13",
    "Mt. 1-4",
    "Mt. 5-7",
    "Mt. 8-10",
    "Mt. 11-13",
    "Mt. 14-16",
    "Mt. 17-19",
    "Mt. 20-22",
    "Mt. 23-25",
    "Ps. 125; Mt. 26-27",
    "Mt. 28; 1 Th. 1-3",
    "1 Th. 4-5; 2 Th. 1-3",
    "Rom. 1-4",
)

DECEMBER = (
    "Rom. 5-8",
    "Rom. 9-12",
    "Rom. 13-16",
    "Eph. 1-4",
    "Eph. 5-6; Ps. 119: 1-80",
    "Phil. 1-4",
    "Col. 1-4",
    "1 Tim. 1-4",
    "1 Tim. 5-6; Tit. 1-3",
    "2 Tim. 1-4",
    "Philem.; Heb. 1-4",
    "Heb. 5-8",
    "Heb. 9-11",
    "Heb. 12-13; Jude",
    "Jas. 1-5",
    "1 Pet. 1-5",
    "2 Pet. 1-3; Jn. 1",
    "Jn. 2-4",
    "Jn. 5-6",
    "Jn. 7-8",
    "Jn. 9-11",
    "Jn. 12-14",
    "Jn. 15-18",
    "Jn. 19-21",
    "1 Jn. 1-5",
    "Ps. 117,119: 81-176; 2 Jn.; 3 Jn.",
    "Rev. 1-4",
    "Rev. 5-9",
    "Rev. 10-14",
    "Rev. 15-18",
    "Rev. 19-22",
)

MONTHLY_READINGS: dict[int, tuple[str, ...]] = {
    1: JANUARY,
    2: FEBRUARY,
    3: MARCH,
    4: APRIL,
    5: MAY,
    6: JUNE,
    7: JULY,
    8: AUGUST,
    9: SEPTEMBER,
    10: OCTOBER,
    11: NOVEMBER,
    12: DECEMBER,
}

ThemeBuckets = tuple[tuple[int | None, str], ...]

MONTHLY_THEMES: dict[int, ThemeBuckets] = {
    1: (
        (7, "Creation and Beginnings"),
        (14, "Patriarchs and Promises"),
        (21, "Joseph's Journey"),
        (24, "Exodus Begins"),
        (None, "Deliverance and Law"),
    ),
    2: (
        (5, "Tabernacle and Worship"),
        (11, "Holiness and Sacrifice"),
        (16, "Laws and Offerings"),
        (21, "Wilderness Preparation"),
        (26, "Journey and Leadership"),
        (None, "Gospel Beginnings"),
    ),
    3: (
        (4, "Wilderness Completion"),
        (9, "Deuteronomy Begins"),
        (15, "Laws and Covenant"),
        (17, "Moses' Final Words"),
        (24, "Conquering the Land"),
        (26, "Joshua's Leadership"),
        (None, "Judges and Deliverance"),
    ),
    4: (
        (4, "Judges and Deliverance"),
        (6, "Ruth's Faithfulness"),
        (13, "Samuel's Ministry"),
        (20, "David's Rise"),
        (25, "David and Saul"),
        (None, "David's Kingdom"),
    ),
    5: (
        (3, "David's Reign Established"),
        (11, "David's Triumphs and Trials"),
        (15, "Kingdom Organization"),
        (19, "Solomon's Wisdom"),
        (24, "Temple Building"),
        (25, "Kingdom Glory"),
        (None, "Wisdom Literature"),
    ),
    6: (
        (5, "Proverbs and Wisdom"),
        (9, "Ecclesiastes and Life"),
        (11, "Song of Songs"),
        (18, "Kingdom Division"),
        (24, "Elijah and Elisha"),
        (26, "Minor Prophets"),
        (None, "Prophetic Voices"),
    ),
    7: (
        (3, "Isaiah's Call and Vision"),
        (8, "Hosea's Love and Judgment"),
        (10, "Micah's Justice and Mercy"),
        (16, "Isaiah's Prophecies"),
        (18, "Isaiah and James"),
        (21, "Hezekiah's Reign"),
        (23, "Isaiah's Comfort"),
        (26, "Servant Songs"),
        (29, "Isaiah's Glory"),
        (None, "New Covenant"),
    ),
    8: (
        (2, "Isaiah's Final Vision"),
        (5, "Josiah's Reforms"),
        (7, "Minor Prophets' Warnings"),
        (13, "Jeremiah's Early Ministry"),
        (18, "Jeremiah and John"),
        (21, "Jeremiah's Prophecies"),
        (24, "Jeremiah's Hope"),
        (26, "Jeremiah's Final Words"),
        (27, "Exile and Revelation"),
        (None, "Ezekiel's Visions"),
    ),
    9: (
        (6, "Ezekiel's Prophecies"),
        (7, "Fall of Jerusalem"),
        (10, "Lamentations and Exile"),
        (12, "Daniel's Wisdom"),
        (17, "Ezekiel's Temple Vision"),
        (19, "Ezekiel's Restoration"),
        (23, "Daniel's Prophecies"),
        (26, "Return from Exile"),
        (27, "Haggai's Encouragement"),
        (None, "Zechariah's Hope"),
    ),
    10: (
        (2, "Zechariah's Final Prophecies"),
        (8, "Restoration and Reform"),
        (11, "Nehemiah's Leadership"),
        (13, "Community Rebuilding"),
        (16, "Final Prophetic Voice"),
        (24, "Job's Testing and Faith"),
        (27, "Job's Suffering and Hope"),
        (None, "Job's Wisdom and Mark's Gospel"),
    ),
    11: (
        (4, "Job's Completion and Mark"),
        (7, "Job's Final Wisdom"),
        (10, "Job's Vindication"),
        (14, "Job's Restoration"),
        (15, "Job's Triumph"),
        (18, "Paul's Corinthian Letters"),
        (26, "Matthew's Gospel"),
        (28, "Matthew's Conclusion"),
        (None, "Thessalonian Letters and Romans"),
    ),
    12: (
        (3, "Romans: Righteousness and Grace"),
        (7, "Prison Epistles: Unity in Christ"),
        (10, "Pastoral Letters: Church Leadership"),
        (14, "Hebrews: Christ's Supremacy"),
        (16, "General Epistles: Living Faith"),
        (24, "John's Gospel: Word Made Flesh"),
        (25, "John's Letters: Love and Truth"),
        (26, "Psalm 119: God's Perfect Word"),
        (None, "Revelation: Christ's Victory"),
    ),
}

FALLBACK_THEME = "Walking with God"


def theme_for(
    month: int, day_of_month: int, themes: dict[int, ThemeBuckets] | None = None
) -> str:
    """Resolve the theme label for a day of the month."""
    buckets = (themes if themes is not None else MONTHLY_THEMES).get(month)
    if not buckets:
        return FALLBACK_THEME
    for upper, label in buckets:
        if upper is None or day_of_month <= upper:
            return label
    return FALLBACK_THEME
