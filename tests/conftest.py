import os

# Qt-виджеты в тестах без дисплея
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
