"""UI string tables for the CLI (English and Simplified Chinese)."""

from __future__ import annotations

DEFAULT_UI_LANGUAGE = "en"

UI_LANGUAGES: list[tuple[str, str]] = [
    ("zh-CN", "中文"),
    ("en", "English"),
]

# Common target language codes shown by the settings menu
LANGUAGE_CODES: list[tuple[str, str]] = [
    ("zh-CN", "简体中文 (Simplified Chinese)"),
    ("zh-TW", "繁體中文 (Traditional Chinese)"),
    ("ja", "日本語 (Japanese)"),
    ("ko", "한국어 (Korean)"),
    ("fr", "Français (French)"),
    ("de", "Deutsch (German)"),
    ("es", "Español (Spanish)"),
    ("ru", "Русский (Russian)"),
    ("pt", "Português (Portuguese)"),
    ("it", "Italiano (Italian)"),
    ("ar", "العربية (Arabic)"),
    ("hi", "हिन्दी (Hindi)"),
    ("tr", "Türkçe (Turkish)"),
    ("vi", "Tiếng Việt (Vietnamese)"),
    ("th", "ภาษาไทย (Thai)"),
    ("pl", "Polski (Polish)"),
]

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "AppTitle": "about.xml File Translation Tool",
        "SelectOperation": "Please select an operation:",
        "SelectPath": "Select path and process about.xml files",
        "ConfigSettings": "Configuration settings",
        "Exit": "Exit",
        "EnterChoice": "Please enter your choice",
        "CurrentConfig": "Current configuration:",
        "Model": "Model",
        "ApiKey": "API Key",
        "ApiUrl": "API URL",
        "TargetLanguage": "Target language",
        "TranslationMarker": "Translation marker",
        "UILanguage": "UI language",
        "LastPath": "Last path",
        "NotSet": "Not set",
        "IsSet": "Set",
        "ConfigSettingsTitle": "=== Configuration Settings ===",
        "ReturnMainMenu": "Save and return to main menu",
        "EnterOption": "Please enter the option number to modify",
        "ConfigSaved": "Configuration saved!",
        "SelectFolder": "Please select folder path:",
        "UseLastPath": "Use last path",
        "EnterNewPath": "Enter new path",
        "EnterFolderPath": "Please enter the folder path",
        "PathInvalid": "Path is invalid or does not exist.",
        "PathNotSelected": "Path not selected.",
        "StartProcessing": "Start processing path: {0}",
        "NoFilesFound": "No about.xml files found.",
        "ProcessingFiles": "Found {0} about.xml files",
        "ProcessingComplete": "=== Processing complete! ===",
        "Total": "Total",
        "Success": "Success",
        "Skipped": "Skipped",
        "Failed": "Failed",
        "SelectModel": "Select model:",
        "ModelSwitched": "Switched to {0} model.",
        "EnterApiKey": "Please enter new API key",
        "ApiKeyUpdated": "API key updated.",
        "EnterApiUrl": "Please enter API URL",
        "ApiUrlUpdated": "API URL updated.",
        "LanguageCodes": "Common language codes:",
        "EnterTargetLanguage": "Please enter target language code",
        "TargetLanguageUpdated": "Target language updated.",
        "EnterTranslationMarker": "Please enter translation marker",
        "TranslationMarkerUpdated": "Translation marker updated.",
        "SelectUILanguage": "Select UI language:",
        "UILanguageUpdated": "UI language updated.",
        "BatchSummary": "Batch Summary",
        "Metric": "Metric",
        "Count": "Count",
        "Errors": "Errors",
        "File": "File",
        "Error": "Error",
    },
    "zh-CN": {
        "AppTitle": "about.xml 文件翻译工具",
        "SelectOperation": "请选择操作:",
        "SelectPath": "选择路径并处理about.xml文件",
        "ConfigSettings": "配置设置",
        "Exit": "退出",
        "EnterChoice": "请输入选择",
        "CurrentConfig": "当前配置:",
        "Model": "模型",
        "ApiKey": "API密钥",
        "ApiUrl": "API地址",
        "TargetLanguage": "目标语言",
        "TranslationMarker": "翻译标记",
        "UILanguage": "界面语言",
        "LastPath": "上次路径",
        "NotSet": "未设置",
        "IsSet": "已设置",
        "ConfigSettingsTitle": "=== 配置设置 ===",
        "ReturnMainMenu": "保存并返回主菜单",
        "EnterOption": "请输入要修改的选项编号",
        "ConfigSaved": "配置已保存！",
        "SelectFolder": "请选择文件夹路径:",
        "UseLastPath": "使用上次路径",
        "EnterNewPath": "输入新路径",
        "EnterFolderPath": "请输入文件夹路径",
        "PathInvalid": "路径无效或不存在。",
        "PathNotSelected": "未选择路径。",
        "StartProcessing": "开始处理路径: {0}",
        "NoFilesFound": "未找到任何about.xml文件。",
        "ProcessingFiles": "找到 {0} 个about.xml文件",
        "ProcessingComplete": "=== 处理完成！ ===",
        "Total": "总计",
        "Success": "成功",
        "Skipped": "跳过",
        "Failed": "失败",
        "SelectModel": "选择模型:",
        "ModelSwitched": "已切换到 {0} 模型。",
        "EnterApiKey": "请输入新的API密钥",
        "ApiKeyUpdated": "API密钥已更新。",
        "EnterApiUrl": "请输入API地址",
        "ApiUrlUpdated": "API地址已更新。",
        "LanguageCodes": "常见语言代码:",
        "EnterTargetLanguage": "请输入目标语言代码",
        "TargetLanguageUpdated": "目标语言已更新。",
        "EnterTranslationMarker": "请输入翻译标记",
        "TranslationMarkerUpdated": "翻译标记已更新。",
        "SelectUILanguage": "选择界面语言:",
        "UILanguageUpdated": "界面语言已更新。",
        "BatchSummary": "处理汇总",
        "Metric": "项目",
        "Count": "数量",
        "Errors": "错误",
        "File": "文件",
        "Error": "错误",
    },
}


def gettext(key: str, ui_language: str = DEFAULT_UI_LANGUAGE, *args: object) -> str:
    """Look up *key* for *ui_language*, falling back to English, then to the key.

    Positional *args* fill ``{0}``-style placeholders.
    """
    table = MESSAGES.get(ui_language, {})
    template = table.get(key)
    if template is None:
        template = MESSAGES[DEFAULT_UI_LANGUAGE].get(key, key)
    return template.format(*args) if args else template
