# core
from .core.state import (  # noqa: F401
    IntentKind as IntentKind,
    NavigationIntent as NavigationIntent,
    NavigatorState as NavigatorState,
    PresentationState as PresentationState,
    ScrollDirection as ScrollDirection,
    Slide as Slide,
    TransitionTag as TransitionTag,
)
from .core.navigator import NavigationStateMachine  # noqa: F401
from .core.input_normalizer import InputNormalizer  # noqa: F401
# services
from .services.lazy_media import LazyMediaScheduler  # noqa: F401
# storage
from .storage.settings_store import GalleryConfig, load_config, save_config  # noqa: F401
# utils
from .utils.debounce import Debouncer  # noqa: F401
# ui
from .ui.counter import CounterPresenter, format_number  # noqa: F401
from .ui.hint import HintController  # noqa: F401
from .ui.controller import GalleryController, GalleryEventFilter  # noqa: F401
from .ui.gallery_view import GalleryWindow  # noqa: F401

__version__ = "0.1.0"
