from django.db import migrations, models

TAG_FIELDS = {
    "musician": ("genres", "instruments"),
    "organizer": ("event_types",),
}


def build_search_tags(apps, schema_editor):
    for model_name, fields in TAG_FIELDS.items():
        model = apps.get_model("profiles", model_name)
        for profile in model.objects.all():
            tokens = [
                f"{field}={tag.replace('|', ' ').strip().casefold()}"
                for field in fields
                for tag in getattr(profile, field) or []
            ]
            profile.search_tags = "|" + "|".join(tokens) + "|" if tokens else ""
            profile.save(update_fields=["search_tags"])


class Migration(migrations.Migration):

    dependencies = [
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="musician",
            name="search_tags",
            field=models.TextField(blank=True, default="", editable=False),
        ),
        migrations.AddField(
            model_name="organizer",
            name="search_tags",
            field=models.TextField(blank=True, default="", editable=False),
        ),
        migrations.RunPython(build_search_tags, migrations.RunPython.noop),
    ]
