"""Description renderers for file tools.

Handles:
- read_file, write_to_file, list_files: Basic file access
- search_files: Backend-specific search (match, regex, semantic)
- insert_content, search_and_replace: Targeted edits
- apply_diff: Delegated to the injected DiffStrategy
"""

import logging

from ..models.enums import RegexBackend, SearchBackend
from .base import ToolArgs

logger = logging.getLogger(__name__)


def get_read_file_description(args: ToolArgs) -> str:
    return f"""## read_file
Description: Request to read the contents of a file at the specified path. Use this when you need to examine the contents of an existing file you do not know the contents of, for example to analyze a note, review text, or extract information. The output includes line numbers prefixed to each line (e.g. "1 | # Title"), which makes it easier to reference specific lines when creating diffs or discussing content.
Parameters:
- path: (required) The path of the file to read (relative to the current working directory {args.cwd})
Usage:
<read_file>
<path>File path here</path>
</read_file>

Example: Requesting to read meeting-notes.md
<read_file>
<path>meeting-notes.md</path>
</read_file>"""


def get_write_to_file_description(args: ToolArgs) -> str:
    return f"""## write_to_file
Description: Request to write full content to a file at the specified path. If the file exists, it will be overwritten with the provided content. If the file doesn't exist, it will be created. This tool will automatically create any directories needed to write the file.
Parameters:
- path: (required) The path of the file to write to (relative to the current working directory {args.cwd})
- content: (required) The content to write to the file. ALWAYS provide the COMPLETE intended content of the file, without any truncation or omissions. You MUST include ALL parts of the file, even if they haven't been modified. Do NOT include the line numbers in the content.
- line_count: (required) The number of lines in the file. Make sure to compute this based on the actual content of the file, not the number of lines in the content you're providing.
Usage:
<write_to_file>
<path>File path here</path>
<content>
Your file content here
</content>
<line_count>total number of lines in the file, including empty lines</line_count>
</write_to_file>

Example: Requesting to write to project/roadmap.md
<write_to_file>
<path>project/roadmap.md</path>
<content>
# Roadmap

- [ ] Draft outline
- [ ] Review with team
</content>
<line_count>4</line_count>
</write_to_file>"""


def get_list_files_description(args: ToolArgs) -> str:
    return f"""## list_files
Description: Request to list files and directories within the specified directory. If recursive is true, it will list all files and directories recursively. If recursive is false or not provided, it will only list the top-level contents. Do not use this tool to confirm the existence of files you may have created, as the user will let you know if the files were created successfully or not.
Parameters:
- path: (required) The path of the directory to list contents for (relative to the current working directory {args.cwd})
- recursive: (optional) Whether to list files recursively. Use true for recursive listing, false or omit for top-level only.
Usage:
<list_files>
<path>Directory path here</path>
<recursive>true or false (optional)</recursive>
</list_files>

Example: Requesting to list all files in the current directory
<list_files>
<path>.</path>
<recursive>false</recursive>
</list_files>"""


def _get_match_search_description(args: ToolArgs) -> str:
    return f"""## search_files
Description: Request to perform a text match search across files in a specified directory. This tool searches for a plain-text query (case-insensitive, fuzzy matching allowed) and returns each matching file with the surrounding context. At most {args.search_settings.max_results} matches are returned.
Parameters:
- path: (required) The path of the directory to search in (relative to the current working directory {args.cwd}). This directory will be recursively searched.
- query: (required) The text to search for.
Usage:
<search_files>
<path>Directory path here</path>
<query>Your search text here</query>
</search_files>

Example: Requesting to find notes mentioning a project name
<search_files>
<path>.</path>
<query>quarterly planning</query>
</search_files>"""


def _get_regex_search_description(args: ToolArgs) -> str:
    if args.search_settings.regex_backend == RegexBackend.COREPLUGIN:
        syntax = "JavaScript regex syntax"
    else:
        syntax = "Rust regex syntax"
    return f"""## search_files
Description: Request to perform a regex search across files in a specified directory, providing context-rich results. This tool searches for patterns or specific content across multiple files, displaying each match with encapsulating context. At most {args.search_settings.max_results} matches are returned.
Parameters:
- path: (required) The path of the directory to search in (relative to the current working directory {args.cwd}). This directory will be recursively searched.
- regex: (required) The regular expression pattern to search for. Uses {syntax}.
- file_pattern: (optional) Glob pattern to filter files (e.g., '*.md' for markdown files). If not provided, it will search all files (*).
Usage:
<search_files>
<path>Directory path here</path>
<regex>Your regex pattern here</regex>
<file_pattern>file pattern here (optional)</file_pattern>
</search_files>

Example: Requesting to search for all open tasks in markdown files
<search_files>
<path>.</path>
<regex>- \\[ \\] .*</regex>
<file_pattern>*.md</file_pattern>
</search_files>"""


def _get_semantic_search_description(args: ToolArgs) -> str:
    return f"""## search_files
Description: Request to perform a semantic search across files in a specified directory. This tool finds passages whose meaning is similar to the query, even when they share no exact words with it. At most {args.search_settings.max_results} passages are returned, ordered by similarity.
Parameters:
- path: (required) The path of the directory to search in (relative to the current working directory {args.cwd}). This directory will be recursively searched.
- query: (required) A natural-language description of what you are looking for.
Usage:
<search_files>
<path>Directory path here</path>
<query>Your natural-language query here</query>
</search_files>

Example: Requesting to find notes about improving sleep
<search_files>
<path>.</path>
<query>habits that help with falling asleep earlier</query>
</search_files>"""


def get_search_files_description(args: ToolArgs) -> str:
    """Render search_files for the active search backend."""
    try:
        backend = SearchBackend(args.search_tool)
    except ValueError:
        logger.debug(f"Unknown search backend {args.search_tool!r}, describing regex search")
        backend = SearchBackend.REGEX

    if backend == SearchBackend.MATCH:
        return _get_match_search_description(args)
    if backend == SearchBackend.SEMANTIC:
        return _get_semantic_search_description(args)
    return _get_regex_search_description(args)


def get_insert_content_description(args: ToolArgs) -> str:
    return f"""## insert_content
Description: Inserts content at specific line positions in a file. This is the primary tool for adding new content (paragraphs, list items, sections) without overwriting the existing text. You can perform multiple insertions at once.
Parameters:
- path: (required) The path of the file to insert content into (relative to the current working directory {args.cwd})
- operations: (required) A JSON array of insertion operations. Each operation is an object with:
    * start_line: (required) The line number where the content should be inserted. The content currently at that line will end up below the inserted content.
    * content: (required) The content to insert at the specified position.
Usage:
<insert_content>
<path>File path here</path>
<operations>[
  {{
    "start_line": 10,
    "content": "Your content here"
  }}
]</operations>
</insert_content>

Example: Insert a new heading and a list item
<insert_content>
<path>journal/2024-05-01.md</path>
<operations>[
  {{
    "start_line": 1,
    "content": "# Wednesday"
  }},
  {{
    "start_line": 8,
    "content": "- Called the dentist"
  }}
]</operations>
</insert_content>"""


def get_search_and_replace_description(args: ToolArgs) -> str:
    return f"""## search_and_replace
Description: Request to perform search and replace operations on a file. Each operation can specify a search pattern (string or regex) and replacement text, with optional line range restrictions and regex flags. Shows a diff preview before applying changes.
Parameters:
- path: (required) The path of the file to modify (relative to the current working directory {args.cwd})
- operations: (required) A JSON array of search/replace operations. Each operation is an object with:
    * search: (required) The text or pattern to search for
    * replace: (required) The text to replace matches with. If multiple lines need to be replaced, use "\\n" for newlines
    * start_line: (optional) Starting line number for restricted replacement
    * end_line: (optional) Ending line number for restricted replacement
    * use_regex: (optional) Whether to treat search as a regex pattern
    * ignore_case: (optional) Whether to ignore case when matching
    * regex_flags: (optional) Additional regex flags (when use_regex is true)
Usage:
<search_and_replace>
<path>File path here</path>
<operations>[
  {{
    "search": "text to find",
    "replace": "replacement text",
    "start_line": 1,
    "end_line": 10
  }}
]</operations>
</search_and_replace>

Example: Replace "draft" with "final" in lines 1-10 of report.md
<search_and_replace>
<path>report.md</path>
<operations>[
  {{
    "search": "draft",
    "replace": "final",
    "start_line": 1,
    "end_line": 10
  }}
]</operations>
</search_and_replace>"""


def get_apply_diff_description(args: ToolArgs) -> str | None:
    """Render apply_diff through the injected strategy, if any."""
    if args.diff_strategy is None:
        return None
    return args.diff_strategy.render_description(args.cwd, args.tool_options)
