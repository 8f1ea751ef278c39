from .link_source import LinkSource, WikipediaLinkSource, extract_links, dedupe_links

__all__ = ["LinkSource", "WikipediaLinkSource", "extract_links", "dedupe_links"]
