import sys
from pathlib import Path

from prefect import flow, task

sys.path.append(str(Path(__file__).parent.parent))

from forum_sitemap.container import get_service_builder
from forum_sitemap.interfaces import UrlEntry


@task(log_prints=True)
def crawl_forum(root_url: str, max_pages: int | None = None) -> list[UrlEntry]:
    """
    Crawl the home page and every listing category of the forum
    """
    services = get_service_builder("prefect").build_sitemap_workflow(
        root_url=root_url, max_pages=max_pages
    )
    try:
        entries = services["orchestrator"].crawl()
    finally:
        services["fetcher"].close()

    print(f"Crawled {len(entries)} URLs from {root_url}")
    return entries


@task(log_prints=True)
def render_sitemap(entries: list[UrlEntry]) -> str:
    """
    Render the crawled entries as sitemap XML
    """
    builder = get_service_builder("prefect")
    return builder.container.get_serializer().transform(entries)


@task(log_prints=True)
def store_sitemap(xml_content: str, output_path: str) -> dict:
    """
    Write the sitemap to a local file
    """
    storage = get_service_builder("prefect").container.get_local_storage()
    result = storage.store(xml_content, output_path)
    print(f"Sitemap written to {result['file_path']} ({result['size']} bytes)")
    return result


@flow(name="Forum Sitemap Workflow")
def forum_sitemap_flow(
    root_url: str = "https://crunchy.rocks/",
    output_path: str | None = None,
    max_pages: int | None = None,
) -> str:
    """
    Crawl a forum and produce its sitemap; any crawl error fails the flow
    """
    print(f"Starting sitemap generation for: {root_url}")

    entries = crawl_forum(root_url, max_pages)
    xml_content = render_sitemap(entries)

    if output_path:
        store_sitemap(xml_content, output_path)

    print("Workflow completed!")
    return xml_content


if __name__ == "__main__":
    forum_sitemap_flow(output_path="output/sitemap.xml")
