"""Rich console output for profile results."""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from github_profiler.models.profile import AnalysisResult, Profile, RatioMetric


def format_ratio(metric: RatioMetric) -> str:
    """Render a ratio as "42.0% (n=12)", or "-" when it could not be measured."""
    if metric.value is None:
        return "-"
    return f"{metric.value * 100:.1f}% (n={metric.sample_size})"


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_verbose(self, *args, **kwargs):
        """Print only in verbose mode."""
        if self.verbose and not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_header(self, login: str):
        """Print report header."""
        if self.quiet:
            return

        self.console.print()
        self.console.print(
            Panel(
                f"[bold blue]GitHub Developer Profile[/bold blue]\n[dim]User: {login}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_identity(self, profile: Profile):
        """Print the user info passthrough fields."""
        if self.quiet:
            return

        table = Table(title="Profile", show_header=False, expand=False)
        table.add_column("Field", style="dim")
        table.add_column("Value")

        bio = profile.bio or ""
        table.add_row("Name", profile.name or profile.login)
        table.add_row("Bio", bio[:60] + "..." if len(bio) > 60 else bio or "-")
        table.add_row("Location", profile.location or "-")
        table.add_row("Company", profile.company or "-")
        table.add_row("Followers", str(profile.followers))
        table.add_row("Following", str(profile.following))
        if profile.organizations:
            table.add_row("Organizations", ", ".join(org.login for org in profile.organizations))
        table.add_row("Timezone", profile.timezone.used or "-")

        self.console.print(table)
        self.console.print()

    def print_skills(self, profile: Profile):
        """Print top languages and topics."""
        if self.quiet or not (profile.skills or profile.topics):
            return

        table = Table(title="Skills", expand=False)
        table.add_column("Language")
        table.add_column("Weight", justify="right")

        for skill in profile.skills[:5]:
            table.add_row(skill.lang, f"{skill.weight * 100:.1f}%")

        self.console.print(table)
        if profile.topics:
            topics = ", ".join(t.topic for t in profile.topics[:8])
            self.console.print(f"[dim]Topics:[/dim] {topics}")
        self.console.print()

    def print_metrics(self, profile: Profile):
        """Print ratio metrics and classifier outcomes."""
        if self.quiet:
            return

        table = Table(title="Signals", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        core = ", ".join(f"{w.start}-{w.end}" for w in profile.core_hours) or "-"
        table.add_row("Core Hours", core)
        table.add_row("Night Ratio", format_ratio(profile.night_ratio))
        table.add_row("Focus Ratio", format_ratio(profile.focus_ratio))
        table.add_row("Upstream Orientation", format_ratio(profile.uoi))
        table.add_row("External PR Accept Rate", format_ratio(profile.external_pr_accept_rate))
        table.add_row("Uni Index", format_ratio(profile.uni_index))
        table.add_row("Grit Factor", format_ratio(profile.grit_factor))
        table.add_row("Talk vs Code", format_ratio(profile.community_engagement))

        forks = profile.fork_destiny
        if forks.total_forks:
            table.add_row(
                "Fork Destiny",
                f"{forks.contributor_forks} contributor / {forks.variant_forks} variant"
                f" / {forks.noise_forks} noise",
            )

        momentum = profile.contribution_momentum
        if momentum.value is not None:
            table.add_row("Momentum", f"{momentum.status} ({momentum.value:.2f})")
        else:
            table.add_row("Momentum", momentum.status)

        table.add_row("Tags", ", ".join(profile.tags) or "-")

        self.console.print(table)
        self.console.print()

    def print_contributions(self, profile: Profile):
        """Print contribution calendar highlights."""
        if self.quiet or profile.contributions is None:
            return

        contributions = profile.contributions
        table = Table(title="Contributions", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Commits", str(contributions.total_commit_contributions))
        table.add_row("Pull Requests", str(contributions.total_pull_request_contributions))
        table.add_row("Issues", str(contributions.total_issue_contributions))
        table.add_row("Code Reviews", str(contributions.total_pull_request_review_contributions))

        calendar = contributions.calendar
        if calendar is not None:
            table.add_row("Total (calendar)", str(calendar.total_contributions))
            table.add_row("Current Streak", f"{calendar.get_streak()} days")
            table.add_row("Longest Streak", f"{calendar.get_longest_streak()} days")
            busiest = calendar.get_busiest_day()
            if busiest:
                table.add_row(
                    "Busiest Day",
                    f"{busiest.date.isoformat()} ({busiest.count} contributions)",
                )

        self.console.print(table)
        self.console.print()

    def print_readme(self, profile: Profile):
        """Print README style and consistency verdict."""
        if self.quiet:
            return

        consistency = profile.consistency
        self.console.print(
            f"[dim]Profile README:[/dim] {profile.readme.style}"
            f"  [dim]consistency:[/dim] {consistency.readme_vs_skills_consistency}"
        )
        if consistency.owned_repos_missing_in_data:
            self.print_verbose(
                "[yellow]Mentioned but not found:[/yellow] "
                + ", ".join(consistency.owned_repos_missing_in_data)
            )
        self.console.print()

    def print_top_repos(self, result: AnalysisResult, limit: int = 5):
        """Print the highest-scoring repositories."""
        if self.quiet or not result.top_repos:
            return

        table = Table(title="Top Repositories", expand=False)
        table.add_column("Repository")
        table.add_column("Language")
        table.add_column("Stars", justify="right")
        table.add_column("Score", justify="right")

        for repo in result.top_repos[:limit]:
            name = f"{repo.repo} [dim](fork)[/dim]" if repo.is_fork else repo.repo
            table.add_row(name, repo.lang or "-", str(repo.stars), f"{repo.score:.1f}")

        self.console.print(table)
        self.console.print()

    def print_full_summary(self, result: AnalysisResult):
        """Print complete profile summary."""
        if self.quiet:
            return

        profile = result.profile
        self.print_header(profile.login)
        self.print_identity(profile)
        self.print_skills(profile)
        self.print_metrics(profile)
        self.print_contributions(profile)
        self.print_readme(profile)
        self.print_top_repos(result)

        coverage = profile.data_coverage
        self.console.print(
            f"[dim]Based on {coverage.repos_total} repos, {coverage.prs_total} PRs,"
            f" {coverage.commits_total} commits[/dim]"
        )

    def print_output_path(self, path: str):
        """Print output file path."""
        if not self.quiet:
            self.console.print(f"[green]Report saved to:[/green] {path}")
