# render: lay out sponsors and assemble the SVG document from
# per-avatar clip paths, styles and linked image groups

import html

from sponsorsvg.avatars import avatar_url, profile_url
from sponsorsvg.layout import AVATAR_SIZE, canvas_size, layout
from sponsorsvg.sponsors import Sponsor

_FONT_IMPORT = """\
      @import url('https://fonts.googleapis.com/css2?family=Inter:wght@600&amp;display=swap');
"""

_DOCUMENT = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <style>
{font_import}      .title {{
        font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
        font-size: 24px;
        font-weight: 600;
        fill: #1f2328;
      }}
      .name {{
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
        font-size: 11px;
        fill: #57606a;
        text-anchor: middle;
      }}
      {avatar_styles}
    </style>
    {clip_paths}
  </defs>

  <rect width="{width}" height="{height}" fill="#ffffff" rx="10"/>

  <text x="{title_x}" y="30" class="title" text-anchor="middle">💖 Supporters</text>
  {avatars}
</svg>"""

_CLIP_PATH = """
      <clipPath id="circle-{index}">
        <circle cx="{center_x}" cy="{center_y}" r="{radius}"/>
      </clipPath>
    """

_AVATAR = """
      <a href="{link}" target="_blank" rel="noopener">
        <g class="avatar-{index}">
          <image
            x="{x}"
            y="{y}"
            width="{size}"
            height="{size}"
            href="{href}"
            clip-path="url(#circle-{index})"
          />
        </g>
        <text x="{center_x}" y="{label_y}" class="name">{name}</text>
      </a>
    """

_AVATAR_STYLE = """
      .avatar-{index} {{
        transform-origin: {center_x}px {center_y}px;
        transition: transform 0.2s;
      }}
      .avatar-{index}:hover {{
        transform: scale(1.1);
      }}
    """


def _num(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return str(value)


def render_svg(
    sponsors: list[Sponsor],
    *,
    avatars: list[str] | None = None,
    escape_names: bool = False,
) -> str:
    """
    Render the sponsor grid as an SVG document.

    With `avatars=None` each image links to the sponsor's remote avatar and
    the document pulls in the Inter web font. Otherwise `avatars` holds one
    embedded image (a `data:` URI) per sponsor and the document is
    self-contained.

    Names are written verbatim unless `escape_names` is set, so a name
    containing `&` or `<` yields malformed XML by default.
    """
    if avatars is not None and len(avatars) != len(sponsors):
        raise ValueError(
            f"got {len(avatars)} avatars for {len(sponsors)} sponsors"
        )

    width, height = canvas_size(len(sponsors))

    clip_paths = []
    avatar_styles = []
    fragments = []
    for index, sponsor in enumerate(sponsors):
        slot = layout(index)
        href = avatar_url(sponsor) if avatars is None else avatars[index]
        name = html.escape(sponsor["name"]) if escape_names else sponsor["name"]

        clip_paths.append(
            _CLIP_PATH.format(
                index=index,
                center_x=slot.center_x,
                center_y=slot.center_y,
                radius=AVATAR_SIZE // 2,
            )
        )
        fragments.append(
            _AVATAR.format(
                index=index,
                link=profile_url(sponsor),
                x=slot.x,
                y=slot.y,
                size=AVATAR_SIZE,
                href=href.replace("&", "&amp;"),
                center_x=slot.center_x,
                label_y=slot.y + AVATAR_SIZE + 15,
                name=name,
            )
        )
        avatar_styles.append(
            _AVATAR_STYLE.format(
                index=index, center_x=slot.center_x, center_y=slot.center_y
            )
        )

    return _DOCUMENT.format(
        width=width,
        height=height,
        font_import=_FONT_IMPORT if avatars is None else "",
        avatar_styles="".join(avatar_styles),
        clip_paths="".join(clip_paths),
        title_x=_num(width / 2),
        avatars="".join(fragments),
    )
