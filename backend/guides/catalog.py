"""Static remediation guides keyed by axe-core rule id.

The catalogue is read-only for the life of the process.  Rules without a
guide simply have no entry; callers use :func:`get_guide` and handle ``None``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

_WCAG = "https://www.w3.org/WAI/WCAG21/Understanding"


@dataclass(frozen=True)
class GuideLink:
    label: str
    href: str


@dataclass(frozen=True)
class FixGuide:
    title: str
    why: str
    how: tuple[str, ...]
    example: str | None = None
    links: tuple[GuideLink, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["how"] = list(self.how)
        data["links"] = [asdict(link) for link in self.links]
        if self.example is None:
            del data["example"]
        if not self.links:
            del data["links"]
        return data


FIX_GUIDES: Mapping[str, FixGuide] = MappingProxyType(
    {
        "image-alt": FixGuide(
            title="Images need alternative text",
            why=(
                "Screen readers announce the alt text in place of an image. "
                "Without it, non-visual users miss the content or its context."
            ),
            how=(
                "If the image conveys meaning, add a descriptive alt.",
                'If the image is decorative, use alt="".',
                "Don't repeat nearby text (no alt=\"Buy now\" when the button already says it).",
            ),
            example=(
                '<img src="/team.jpg" alt="Team standing in front of the office" />\n'
                '<img src="/divider.png" alt="" />'
            ),
            links=(GuideLink("WCAG 1.1.1 Non-text Content", f"{_WCAG}/non-text-content.html"),),
        ),
        "link-name": FixGuide(
            title="Links need discernible text",
            why=(
                "Screen readers often list links out of context, so \"click here\" "
                "or icon-only links make navigation confusing."
            ),
            how=(
                "Give the link visible text, or",
                "provide an accessible name with aria-label, or",
                "for an icon/image-only link, add alt text to the image (and/or aria-label on the link).",
            ),
            example=(
                '<a href="/pricing">View pricing</a>\n\n'
                '<a href="/home" aria-label="Home">\n'
                '  <svg aria-hidden="true" ...></svg>\n'
                "</a>"
            ),
            links=(GuideLink("WCAG 2.4.4 Link Purpose (In Context)", f"{_WCAG}/link-purpose-in-context.html"),),
        ),
        "button-name": FixGuide(
            title="Buttons need an accessible name",
            why="Without a name, assistive technology cannot announce what the button does.",
            how=(
                "Put visible text inside the button where possible.",
                "If it is icon-only, add aria-label.",
                "If it contains an SVG, mark the SVG aria-hidden and label the button.",
            ),
            example=(
                '<button type="button">Save</button>\n\n'
                '<button type="button" aria-label="Close dialog">\n'
                '  <svg aria-hidden="true" ...></svg>\n'
                "</button>"
            ),
            links=(GuideLink("WCAG 4.1.2 Name, Role, Value", f"{_WCAG}/name-role-value.html"),),
        ),
        "label": FixGuide(
            title="Form controls need labels",
            why=(
                "Labels tell screen reader users what a field expects and enlarge "
                "the click/tap target."
            ),
            how=(
                "Prefer a <label> whose for= matches the input id.",
                "Alternatively, wrap the input in <label>...</label>.",
                "Use aria-label only when a visible label is truly impossible.",
            ),
            example=(
                '<label for="email">Email</label>\n'
                '<input id="email" name="email" type="email" autocomplete="email" />\n\n'
                "<label>\n"
                "  Password\n"
                '  <input name="password" type="password" />\n'
                "</label>"
            ),
            links=(GuideLink("WCAG 3.3.2 Labels or Instructions", f"{_WCAG}/labels-or-instructions.html"),),
        ),
        "select-name": FixGuide(
            title="Select elements need an accessible name",
            why="An unnamed select is announced as a bare \"combo box\" with no context.",
            how=(
                "Connect a <label> with for/id (recommended).",
                "Or provide aria-label / aria-labelledby if a visible label is impossible.",
            ),
            example=(
                '<label for="country">Country</label>\n'
                '<select id="country" name="country">\n'
                "  <option>Belgium</option>\n"
                "</select>"
            ),
            links=(GuideLink("WCAG 4.1.2 Name, Role, Value", f"{_WCAG}/name-role-value.html"),),
        ),
        "html-has-lang": FixGuide(
            title="HTML document needs lang",
            why="Screen readers use lang to choose pronunciation rules and voices.",
            how=(
                'Add lang to the <html> element (e.g. lang="en", lang="nl", lang="fr").',
                "Mark passages in other languages with their own lang attribute.",
            ),
            example=(
                '<html lang="en">\n'
                "  ...\n"
                "</html>\n\n"
                '<p lang="fr">Bonjour tout le monde</p>'
            ),
            links=(GuideLink("WCAG 3.1.1 Language of Page", f"{_WCAG}/language-of-page.html"),),
        ),
        "landmark-one-main": FixGuide(
            title="Page should have one main landmark",
            why="Landmarks let keyboard and screen reader users jump between major sections.",
            how=(
                "Wrap the primary page content in <main>.",
                "Use only one <main> per page.",
                "Use <header>, <nav>, <aside> and <footer> for the other sections.",
            ),
            example=(
                "<header>...</header>\n"
                "<nav>...</nav>\n"
                '<main id="content">...</main>\n'
                "<footer>...</footer>"
            ),
            links=(GuideLink("WCAG 2.4.1 Bypass Blocks", f"{_WCAG}/bypass-blocks.html"),),
        ),
        "region": FixGuide(
            title="Content should be contained by landmarks",
            why="Landmarks give assistive technology a navigable outline of the page.",
            how=(
                "Use semantic landmarks (<main>, <nav>, <header>, <footer>, <aside>).",
                "For a generic container, add role=\"region\" and an aria-label.",
            ),
            example=(
                '<section aria-label="Featured products">\n'
                "  ...\n"
                "</section>"
            ),
            links=(GuideLink("WCAG 1.3.1 Info and Relationships", f"{_WCAG}/info-and-relationships.html"),),
        ),
        "color-contrast": FixGuide(
            title="Insufficient color contrast",
            why="Low contrast text is hard to read, especially with low vision or on bright screens.",
            how=(
                "Darken or lighten the text relative to its background.",
                "Increase font size or weight (large text has a lower ratio requirement).",
                "Put a solid overlay behind text placed over busy images.",
            ),
            example=(
                "/* darken text or lighten background */\n"
                ".card-title { color: #0b1220; }\n"
                ".card { background: #ffffff; }"
            ),
            links=(GuideLink("WCAG 1.4.3 Contrast (Minimum)", f"{_WCAG}/contrast-minimum.html"),),
        ),
    }
)


def get_guide(rule_id: str) -> FixGuide | None:
    """Return the fix guide for *rule_id*, or ``None`` if there is none."""
    return FIX_GUIDES.get(rule_id)
