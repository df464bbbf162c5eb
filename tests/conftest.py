"""Shared fixtures: trending page markup and a stubbed HTTP layer."""

from typing import Any, Dict, List

import pytest
import requests

REPOSITORIES_HTML = """
<html>
<body>
<div class="application-main">
  <div class="Box">
    <div class="Box-header d-md-flex">
      <nav><a href="/trending">Repositories</a><a href="/trending/developers">Developers</a></nav>
    </div>
    <div>
      <article class="Box-row">
        <div class="float-right d-flex">
          <a href="/login?return_to=%2Fpsf%2Frequests" class="btn-sm btn">Star</a>
        </div>
        <h2 class="h3 lh-condensed">
          <a href="/psf/requests" data-view-component="true" class="Link">
            <svg aria-hidden="true" class="octicon octicon-repo mr-1"></svg>
            <span data-view-component="true" class="text-normal">
              psf /
            </span>
            requests
          </a>
        </h2>
        <p class="col-9 color-fg-muted my-1 pr-4">
          A simple, yet elegant, HTTP library.
        </p>
        <div class="f6 color-fg-muted mt-2">
          <span class="d-inline-block ml-0 mr-3">
            <span class="repo-language-color" style="background-color: #3572A5"></span>
            <span itemprop="programmingLanguage">Python</span>
          </span>
          <a href="/psf/requests/stargazers" class="Link--muted d-inline-block mr-3">
            <svg aria-label="star" class="octicon octicon-star"></svg>
            51,234
          </a>
          <a href="/psf/requests/forks" class="Link--muted d-inline-block mr-3">
            <svg aria-label="fork" class="octicon octicon-repo-forked"></svg>
            9,321
          </a>
          <span class="d-inline-block mr-3">
            Built by
            <a class="d-inline-block" href="/kennethreitz"><img class="avatar mb-1" src="https://avatars.githubusercontent.com/u/119893?s=40&amp;v=4" width="20" height="20" alt="@kennethreitz"></a>
            <a class="d-inline-block" href="/nateprewitt"><img class="avatar mb-1" src="https://avatars.githubusercontent.com/u/5271761?s=40&amp;v=4" width="20" height="20" alt="@nateprewitt"></a>
          </span>
          <span class="d-inline-block float-sm-right">
            <svg aria-hidden="true" class="octicon octicon-star"></svg>
            1,024 stars today
          </span>
        </div>
      </article>
      <article class="Box-row">
        <h2 class="h3 lh-condensed">
          <a href="/someone/dotfiles"><span class="text-normal">someone /</span> dotfiles</a>
        </h2>
        <div class="f6 color-fg-muted mt-2">
          <a href="/someone/dotfiles/stargazers" class="Link--muted">812</a>
          <a href="/someone/dotfiles/forks" class="Link--muted">40</a>
          <span class="d-inline-block mr-3">
            Built by
            <a href="/someone"><img class="avatar" src="https://avatars.githubusercontent.com/u/42?s=40"></a>
            <a href="/ghost"><img class="avatar" alt="@ghost"></a>
          </span>
          <span class="d-inline-block float-sm-right">57 stars this week</span>
        </div>
      </article>
      <article class="Box-row">
        <p>Row without a title or footer</p>
      </article>
    </div>
  </div>
</div>
</body>
</html>
"""

DEVELOPERS_HTML = """
<html>
<body>
<div class="Box">
  <div class="Box-header"></div>
  <div>
    <article class="Box-row d-flex" id="pa-torvalds">
      <a class="color-fg-muted f6" href="#pa-torvalds">1</a>
      <div class="mx-3">
        <a href="/torvalds"><img class="rounded avatar-user" src="https://avatars.githubusercontent.com/u/1024025?s=96&amp;v=4" width="48" height="48" alt="@torvalds"></a>
      </div>
      <div class="d-sm-flex flex-auto">
        <div class="col-sm-8 d-md-flex">
          <div class="col-md-6">
            <h1 class="h3 lh-condensed">
              <a href="/torvalds">
                Linus Torvalds
              </a>
            </h1>
            <p class="f4 text-normal mb-1">
              <a class="Link--secondary" href="/torvalds">
                torvalds
              </a>
            </p>
          </div>
          <div class="col-md-6">
            <div class="mt-2 mb-3 my-md-0">
              <article>
                <div class="f6 color-fg-muted text-uppercase mb-1">
                  <svg aria-hidden="true" class="octicon octicon-flame"></svg>
                  Popular repo
                </div>
                <h1 class="h4 lh-condensed">
                  <a href="/torvalds/linux" class="css-truncate-target">
                    linux
                  </a>
                </h1>
                <div class="f6 color-fg-muted mt-1">
                  Linux kernel source tree
                </div>
              </article>
            </div>
          </div>
        </div>
      </div>
    </article>
    <article class="Box-row d-flex" id="pa-octocat">
      <div class="d-sm-flex flex-auto">
        <div class="col-sm-8 d-md-flex">
          <div class="col-md-6">
            <h1 class="h3 lh-condensed"><a href="/octocat">The Octocat</a></h1>
            <p class="f4 text-normal mb-1"><a href="/octocat">octocat</a></p>
          </div>
        </div>
      </div>
    </article>
  </div>
</div>
</body>
</html>
"""

EMPTY_HTML = "<html><body><div class='Box'><div class='Box-header'></div></div></body></html>"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str, status_code: int = 200, url: str = "") -> None:
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(
                f"{self.status_code} Client Error for url: {self.url}", response=self
            )


@pytest.fixture
def repositories_html() -> str:
    return REPOSITORIES_HTML


@pytest.fixture
def developers_html() -> str:
    return DEVELOPERS_HTML


@pytest.fixture
def serve(monkeypatch):
    """Replace requests.Session.get with a canned response.

    Returns a function taking the markup (or an exception to raise) and an
    optional status code; it returns the list that records every call as a
    dict of url, params and timeout.
    """

    def _serve(body: Any, status_code: int = 200) -> List[Dict[str, Any]]:
        calls: List[Dict[str, Any]] = []

        def fake_get(session, url, params=None, timeout=None, **kwargs):
            calls.append({"url": url, "params": params, "timeout": timeout})
            if isinstance(body, Exception):
                raise body
            return FakeResponse(body, status_code, url)

        monkeypatch.setattr(requests.Session, "get", fake_get)
        return calls

    return _serve


@pytest.fixture
def empty_html() -> str:
    return EMPTY_HTML
