import click
import json
import logging
import requests
from core.scrapers.scraper_factory import ScraperFactory
from core.trending.options import DATE_RANGES, load_options
from core.trending.spoken_languages import SPOKEN_LANGUAGE_CODES, spoken_language_code
from config.settings import get_settings
from tabulate import tabulate
import traceback

# Configure logging
logging.basicConfig(
    level=get_settings().LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("trending-cli")


def listing_options(func):
    """Options shared by the listing commands."""
    func = click.option("--output", "-o", type=click.Path(), help="Save results to file")(func)
    func = click.option(
        "--format-type",
        "-f",
        type=click.Choice(["text", "table", "csv", "json"]),
        default="table",
        help="Output format (default: table)",
    )(func)
    func = click.option("--url", "-u", default=None, help="GitHub site root (default: from settings)")(func)
    func = click.option(
        "--since",
        "-d",
        type=click.Choice(DATE_RANGES),
        default=None,
        help="Date range of the listing (GitHub defaults to daily)",
    )(func)
    func = click.option("--language", "-l", default=None, help="Programming language filter, e.g. python")(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """GitHub trending listing scraper."""
    ctx.ensure_object(dict)
    ctx.obj["VERBOSE"] = verbose

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")


@cli.command()
@listing_options
@click.option("--spoken-language", "-s", default=None, help="Spoken language code, e.g. zh")
@click.option(
    "--spoken-language-name",
    "-S",
    default=None,
    help="Spoken language full name, e.g. chinese (overrides --spoken-language)",
)
@click.pass_context
def repos(ctx, language, since, url, format_type, output, spoken_language, spoken_language_name):
    """List trending repositories."""
    if spoken_language_name and not spoken_language_code(spoken_language_name):
        click.echo(f"Warning: Unknown spoken language '{spoken_language_name}', not filtering by it.")

    options = load_options(
        github_url=url,
        spoken_language=spoken_language,
        spoken_language_name=spoken_language_name,
        language=language,
        date_range=since,
    )
    items = run_scraper(ctx, "repositories", options)
    write_output(format_repositories(items, format_type), output)


@cli.command()
@listing_options
@click.pass_context
def developers(ctx, language, since, url, format_type, output):
    """List trending developers."""
    options = load_options(github_url=url, language=language, date_range=since)
    items = run_scraper(ctx, "developers", options)
    write_output(format_developers(items, format_type), output)


@cli.command()
def languages():
    """List the spoken language names accepted by --spoken-language-name."""
    table_data = sorted(SPOKEN_LANGUAGE_CODES.items())
    click.echo(tabulate(table_data, headers=["Language", "Code"], tablefmt="simple"))


def run_scraper(ctx, source, options):
    """Run the named scraper, reporting request errors and exiting non-zero."""
    scraper = ScraperFactory.create_scraper(source, options=options)
    click.echo(f"Fetching trending {source} from {scraper.url}...", err=True)

    try:
        items = scraper.scrape()
    except requests.exceptions.HTTPError as e:
        click.echo(f"HTTP error: {str(e)}", err=True)
        fail(ctx)
    except requests.exceptions.ConnectionError as e:
        click.echo(f"Connection error - could not reach {scraper.url}: {str(e)}", err=True)
        fail(ctx)
    except requests.exceptions.Timeout as e:
        click.echo(f"Request timed out: {str(e)}", err=True)
        fail(ctx)
    except requests.exceptions.RequestException as e:
        click.echo(f"Request error: {str(e)}", err=True)
        fail(ctx)

    click.echo(f"Found {len(items)} trending {source}.", err=True)
    return items


def fail(ctx):
    if ctx.obj["VERBOSE"]:
        click.echo(traceback.format_exc(), err=True)
    ctx.exit(1)


def write_output(result_output, output):
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(result_output)
        click.echo(f"Results written to {output}")
    else:
        click.echo(result_output)


def format_repositories(repositories, format_type):
    """Format trending repositories based on specified format type."""
    if format_type == "json":
        return json.dumps(repositories, indent=2, ensure_ascii=False)

    if not repositories:
        return "No trending repositories found."

    if format_type == "text":
        lines = [f"Found {len(repositories)} repositories:"]
        for i, repo in enumerate(repositories, 1):
            lines.append(f"\n{i}. {repo['author']}/{repo['name']} ({repo['language']})")
            if repo["description"]:
                lines.append(f"   {repo['description']}")
            lines.append(
                f"   Stars: {repo['stars']:,}  Forks: {repo['forks']:,}  Added: +{repo['stars_added']:,}"
            )
            lines.append(f"   URL: {repo['link']}")

        return "\n".join(lines)

    headers = ["Repository", "Language", "Stars", "Forks", "Added", "URL"]

    if format_type == "csv":
        import csv
        from io import StringIO

        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(headers + ["Description", "Built By"])
        for repo in repositories:
            writer.writerow([
                f"{repo['author']}/{repo['name']}",
                repo["language"],
                repo["stars"],
                repo["forks"],
                repo["stars_added"],
                repo["link"],
                repo["description"],
                " ".join(repo["built_by"]),
            ])

        return output.getvalue()

    # table format
    table_data = []
    for repo in repositories:
        full_name = f"{repo['author']}/{repo['name']}"
        if len(full_name) > 40:
            full_name = full_name[:37] + "..."

        table_data.append([
            full_name,
            repo["language"],
            f"{repo['stars']:,}",
            f"{repo['forks']:,}",
            f"+{repo['stars_added']:,}",
            repo["link"],
        ])

    return tabulate(table_data, headers=headers, tablefmt="grid")


def format_developers(developers, format_type):
    """Format trending developers based on specified format type."""
    if format_type == "json":
        return json.dumps(developers, indent=2, ensure_ascii=False)

    if not developers:
        return "No trending developers found."

    if format_type == "text":
        lines = [f"Found {len(developers)} developers:"]
        for i, dev in enumerate(developers, 1):
            lines.append(f"\n{i}. {dev['name']} ({dev['username']})")
            if dev["popular_repo"]:
                lines.append(f"   Popular repo: {dev['popular_repo']}")
            if dev["description"]:
                lines.append(f"   {dev['description']}")

        return "\n".join(lines)

    headers = ["Name", "Username", "Popular Repo", "Description"]

    if format_type == "csv":
        import csv
        from io import StringIO

        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(headers)
        for dev in developers:
            writer.writerow([dev["name"], dev["username"], dev["popular_repo"], dev["description"]])

        return output.getvalue()

    # table format
    table_data = []
    for dev in developers:
        description = dev["description"]
        if len(description) > 50:
            description = description[:47] + "..."
        table_data.append([dev["name"], dev["username"], dev["popular_repo"], description])

    return tabulate(table_data, headers=headers, tablefmt="grid")


if __name__ == "__main__":
    # This runs the Click application
    cli.main(obj={})
