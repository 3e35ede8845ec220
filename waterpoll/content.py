"""
Static page content.

The historical river levels are fixed display figures, not derived from
stored votes.
"""

POLL_QUESTION = "هل تؤيد اتخاذ إجراءات عاجلة لمعالجة أزمة المياه؟"

CHOICE_LABELS = {
    "yes": "نعم، عاجل جداً",
    "no": "لا، ليس الآن",
}

VOTE_SUCCESS_MESSAGE = "تم تسجيل صوتك بنجاح! شكراً لمشاركتك."
VOTE_REJECTED_MESSAGE = "تعذر تسجيل صوتك. يرجى اختيار نعم أو لا."

# Water level as a percentage of the 2016 level
HISTORY_YEARS = ["2016", "2017", "2018", "2019", "2020", "2021", "2022", "2023", "2024"]
TIGRIS_LEVELS = [100, 95, 88, 82, 75, 68, 58, 48, 35]
EUPHRATES_LEVELS = [100, 92, 85, 78, 68, 55, 45, 35, 30]

HISTORY_CHART = {
    "labels": HISTORY_YEARS,
    "datasets": [
        {"label": "دجلة (%)", "data": TIGRIS_LEVELS, "color": "rgba(239, 68, 68, 1)"},
        {"label": "الفرات (%)", "data": EUPHRATES_LEVELS, "color": "rgba(234, 88, 12, 1)"},
    ],
}
