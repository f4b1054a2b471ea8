"""
User-facing strings in the supported interface languages
"""

DEFAULT_LANGUAGE = "en"

# Language the model is asked to answer in, per interface language
RESPONSE_LANGUAGES = {
    "en": "English",
    "zh": "Chinese"
}

MESSAGES = {
    "en": {
        "analysis_failed": "An error occurred while analyzing your manuscript. Please check your network connection or API key settings.",
        "busy": "An analysis is already in progress. Please wait for it to finish.",
        "disclaimer": "All estimated metrics (impact factor, review time, etc.) are generated from the AI knowledge base and are for reference only. Please rely on the journals' official websites for current data."
    },
    "zh": {
        "analysis_failed": "分析稿件时发生错误，请检查您的网络连接或 API Key 设置。",
        "busy": "分析正在进行中，请稍候。",
        "disclaimer": "所有预估指标（影响因子、审稿周期等）基于 AI 知识库生成，仅供参考，请以期刊官网实时数据为准。"
    }
}


def get_message(key, language=DEFAULT_LANGUAGE):
    """Look up a message, falling back to English for unknown languages"""
    catalog = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    return catalog.get(key, MESSAGES[DEFAULT_LANGUAGE][key])


def response_language(language):
    return RESPONSE_LANGUAGES.get(language, RESPONSE_LANGUAGES[DEFAULT_LANGUAGE])
