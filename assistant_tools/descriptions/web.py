"""Description renderers for web tools."""

from .base import ToolArgs

DEFAULT_BROWSER_VIEWPORT_SIZE = "900x600"


def get_search_web_description(args: ToolArgs) -> str:
    return """## search_web
Description: Request to search the web for up-to-date information. Use this tool when the answer depends on recent events, public documentation, or facts that are not available in the user's files. Returns a list of results, each with a title, URL and snippet.
Parameters:
- query: (required) The search query. Keep it short and specific, as you would type it into a search engine.
Usage:
<search_web>
<query>Your search query here</query>
</search_web>

Example: Requesting to search for a recent release
<search_web>
<query>python 3.13 release notes</query>
</search_web>"""


def get_fetch_urls_content_description(args: ToolArgs) -> str:
    return """## fetch_urls_content
Description: Request to fetch the readable content of one or more web pages. Use this after search_web to read the pages behind the most relevant results, or when the user gives you a URL directly. The content is returned as markdown.
Parameters:
- urls: (required) A JSON array of URLs to fetch. Fetch at most 10 URLs at once.
Usage:
<fetch_urls_content>
<urls>[
  "https://example.com/page-1",
  "https://example.com/page-2"
]</urls>
</fetch_urls_content>

Example: Requesting to fetch a documentation page
<fetch_urls_content>
<urls>[
  "https://docs.python.org/3/whatsnew/3.13.html"
]</urls>
</fetch_urls_content>"""


def get_browser_action_description(args: ToolArgs) -> str | None:
    """Render browser_action only when interactive browsing is supported."""
    if not args.supports_browser:
        return None
    viewport = args.browser_viewport_size or DEFAULT_BROWSER_VIEWPORT_SIZE
    return f"""## browser_action
Description: Request to interact with a Puppeteer-controlled browser. Every action, except `close`, will be responded to with a screenshot of the browser's current state, along with any new console logs. You may only perform one browser action per message, and wait for the user's response including a screenshot and logs to determine the next action.
- The sequence of actions **must always start with** launching the browser at a URL, and **must always end with** closing the browser. If you need to visit a new URL that is not possible to navigate to from the current webpage, you must first close the browser, then launch again at the new URL.
- The browser window has a resolution of **{viewport}** pixels. When performing any click actions, ensure the coordinates are within this resolution range.
Parameters:
- action: (required) The action to perform. The available actions are:
    * launch: Launch a new browser instance at the specified URL. This **must always be the first action**.
        - Use with the `url` parameter to provide the URL.
    * click: Click at a specific x,y coordinate.
        - Use with the `coordinate` parameter to specify the location.
    * type: Type a string of text on the keyboard.
        - Use with the `text` parameter to provide the string to type.
    * scroll_down: Scroll down the page by one page height.
    * scroll_up: Scroll up the page by one page height.
    * close: Close the browser instance. This **must always be the final browser action**.
- url: (optional) Use this for providing the URL for the `launch` action.
- coordinate: (optional) The X and Y coordinates for the `click` action. Coordinates should be within the **{viewport}** resolution.
- text: (optional) Use this for providing the text for the `type` action.
Usage:
<browser_action>
<action>Action to perform (e.g., launch, click, type, scroll_down, scroll_up, close)</action>
<url>URL to launch the browser at (optional)</url>
<coordinate>x,y coordinates (optional)</coordinate>
<text>Text to type (optional)</text>
</browser_action>

Example: Requesting to launch a browser at https://example.com
<browser_action>
<action>launch</action>
<url>https://example.com</url>
</browser_action>"""
