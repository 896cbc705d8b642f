from decouple import AutoConfig


class TimerConfig:
    config = AutoConfig()

    # Diagnostics only; the timer itself takes no settings
    LOG_LEVEL = config('SLEEPBAR_LOG_LEVEL', default='WARNING', cast=str.upper)
