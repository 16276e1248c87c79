"""Route table for the site. Every named route is registered here."""

from blog.presentation.web.controllers import ArticleController, PageController
from blog.presentation.web.router import Router


def register_routes(router: Router, pages: PageController, articles: ArticleController) -> None:
    """Register all routes in precedence order.

    Literal paths are registered before ``{id}`` paths, and ``{id:int}``
    only matches digits, so ``/articles/create`` is never read as an id and
    ``/articles/abc`` falls through to the not-found handler.
    """
    router.register("home", "GET", "/", pages.home)
    router.register("about", "GET", "/about", pages.about)

    router.register("articles.index", "GET", "/articles", articles.index)
    router.register("articles.store", "POST", "/articles", articles.store)
    router.register("articles.create", "GET", "/articles/create", articles.create_form)

    router.register("articles.show", "GET", "/articles/{id:int}", articles.show)
    router.register("articles.edit", "GET", "/articles/{id:int}/edit", articles.edit_form)
    router.register("articles.update", "POST", "/articles/{id:int}", articles.update)
    router.register("articles.delete", "POST", "/articles/{id:int}/delete", articles.delete)
