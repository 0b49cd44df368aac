"""
Command-line construction for monolith.

Order of the produced tokens:
  1. boolean switches   -a -c -i -j -F -v -f -I -n -m -M -e -k -q
  2. valued options     -b -u -t -C -E
  3. domain lists       -d <domain>... then -B <domain>...
  4. output             -o -
  5. content source     <url> or - (read HTML from stdin)
"""
from __future__ import annotations

from monolith_api.models import ArchiveOptions, ArchiveRequest
from monolith_api.utils import is_blank

STDIN_MARKER = "-"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"
MHTML_CONTENT_TYPE = "multipart/related"

BOOLEAN_FLAGS: tuple[tuple[str, str], ...] = (
    ("exclude_audio", "-a"),
    ("exclude_css", "-c"),
    ("exclude_images", "-i"),
    ("exclude_js", "-j"),
    ("exclude_fonts", "-F"),
    ("exclude_videos", "-v"),
    ("omit_frames", "-f"),
    ("isolate", "-I"),
    ("extract_no_script", "-n"),
    ("mhtml", "-m"),
    ("no_metadata", "-M"),
    ("ignore_network_errors", "-e"),
    ("accept_invalid_certs", "-k"),
    ("quiet", "-q"),
)

VALUE_FLAGS: tuple[tuple[str, str], ...] = (
    ("base_url", "-b"),
    ("user_agent", "-u"),
    ("timeout_seconds", "-t"),
    ("cookies_file", "-C"),
    ("encoding", "-E"),
)


def _option_arguments(o: ArchiveOptions) -> list[str]:
    args = [flag for field, flag in BOOLEAN_FLAGS if getattr(o, field)]

    for field, flag in VALUE_FLAGS:
        value = getattr(o, field)
        if value is None:
            continue
        if isinstance(value, str):
            if is_blank(value):
                continue
        else:
            value = str(value)
        args += [flag, value]

    for domain in o.allow_domains:
        args += ["-d", domain]
    for domain in o.block_domains:
        args += ["-B", domain]

    return args


def build_arguments(request: ArchiveRequest) -> list[str]:
    if not request.has_source:
        raise ValueError("request has neither a url nor stdin HTML")
    args = _option_arguments(request.options)
    args += ["-o", "-"]
    args.append(STDIN_MARKER if request.uses_stdin else request.url)
    return args


def content_type_for(options: ArchiveOptions) -> str:
    return MHTML_CONTENT_TYPE if options.mhtml else HTML_CONTENT_TYPE
