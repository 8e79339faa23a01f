"""Compiled-in string tables for the inline store.

Kept identical to ``lang/strings_*.json``; tests/test_store.py fails on drift.
"""

INLINE_TABLES = {
    "en": {
        "app_name": "demo",
        "button_click_me": "Click me!",
        "welcome_title": "Welcome to KMP Demo",
        "welcome_description": "This demonstrates shared string resources between Android and iOS",
        "action_ok": "OK",
        "action_cancel": "Cancel",
        "action_retry": "Retry",
        "error_network": "Network error occurred",
        "error_generic": "Something went wrong",
        "sample_text_1": "This is a shared string resource",
        "sample_text_2": "Available on both Android and iOS",
        "sample_text_3": "Centralized and easy to maintain",
        "native_demo_title": "Native UI Demo",
        "native_demo_description": "This demonstrates using shared strings in native Android XML layouts and iOS Storyboards",
        "counter_label": "Counter: %d",
        "language_info": "Language Info:",
        "current_language": "Current Language: %s",
        "is_rtl": "Is RTL: %s",
    },
    "ar": {
        "app_name": "تطبيق تجريبي",
        "button_click_me": "اضغط هنا!",
        "welcome_title": "مرحباً بك في تطبيق KMP التجريبي",
        "welcome_description": "هذا يوضح موارد النصوص المشتركة بين أندرويد و iOS",
        "action_ok": "موافق",
        "action_cancel": "إلغاء",
        "action_retry": "إعادة المحاولة",
        "error_network": "حدث خطأ في الشبكة",
        "error_generic": "حدث خطأ ما",
        "sample_text_1": "هذا مورد نص مشترك",
        "sample_text_2": "متاح على كل من أندرويد و iOS",
        "sample_text_3": "مركزي وسهل الصيانة",
        "native_demo_title": "عرض واجهة المستخدم الأصلية",
        "native_demo_description": "هذا يوضح استخدام النصوص المشتركة في تخطيطات Android XML الأصلية و iOS Storyboards",
        "counter_label": "العداد: %d",
        "language_info": "معلومات اللغة:",
        "current_language": "اللغة الحالية: %s",
        "is_rtl": "من اليمين إلى اليسار: %s",
    },
}
