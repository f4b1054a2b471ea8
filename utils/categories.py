"""
Subject area options offered to the user when submitting a manuscript
"""

# Sentinel meaning "let the model infer the field from the manuscript"
AUTO_DETECT = "Auto-detect"

# Canonical subject area names with their Chinese display labels
SUBJECT_AREAS = {
    "Computer Science": "计算机科学",
    "Medicine & Health": "医学与健康",
    "Engineering": "工程学",
    "Social Sciences": "社会科学",
    "Business & Management": "商业与管理",
    "Biology": "生物学",
    "Physics": "物理学",
    "Chemistry": "化学",
    "Arts & Humanities": "艺术与人文",
    "Environmental Science": "环境科学"
}

# Accepted spellings of the auto-detect sentinel
AUTO_DETECT_ALIASES = {"auto", "auto-detect", "autodetect", "自动检测"}


def normalize_subject_area(value):
    """Map user input onto AUTO_DETECT or a canonical subject area name"""
    if value is None or not value.strip():
        return AUTO_DETECT
    
    cleaned = value.strip()
    if cleaned.lower() in AUTO_DETECT_ALIASES:
        return AUTO_DETECT
    
    for name, label in SUBJECT_AREAS.items():
        if cleaned.lower() == name.lower() or cleaned == label:
            return name
    
    # Free-form fields are passed through verbatim
    return cleaned
