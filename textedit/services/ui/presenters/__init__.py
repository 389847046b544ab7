from .main_presenter import ActionResult, IMainView, MainPresenter

__all__ = ["ActionResult", "IMainView", "MainPresenter"]
