import uuid

import django.db.models.deletion
import simple_history.models
import taggit.managers
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("taggit", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
                ("sku", models.CharField(max_length=100, unique=True, verbose_name="SKU")),
                ("name", models.CharField(max_length=200, verbose_name="nome")),
                ("short_description", models.CharField(blank=True, help_text="Descrição resumida para listagens (máx. 255 caracteres)", max_length=255, verbose_name="descrição curta")),
                ("long_description", models.TextField(blank=True, help_text="Descrição completa do produto", verbose_name="descrição longa")),
                ("is_published", models.BooleanField(db_index=True, default=True, help_text="Publicado no catálogo (Não = oculto/descontinuado)", verbose_name="publicado")),
                ("is_available", models.BooleanField(db_index=True, default=True, help_text="Disponível para venda (Não = pausado)", verbose_name="disponível")),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="metadados")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("keywords", taggit.managers.TaggableManager(blank=True, help_text="Tags para SEO e busca. Separe por vírgula.", through="taggit.TaggedItem", to="taggit.Tag", verbose_name="palavras-chave")),
            ],
            options={
                "verbose_name": "produto",
                "verbose_name_plural": "produtos",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["is_published", "is_available"], name="merchman_prod_pub_avail_idx")],
            },
        ),
        migrations.CreateModel(
            name="Variant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sku", models.CharField(max_length=100, unique=True, verbose_name="SKU")),
                ("is_master", models.BooleanField(default=False, help_text="Variante principal do produto", verbose_name="principal")),
                ("on_sale", models.BooleanField(db_index=True, default=False, help_text="Preço promocional ativo", verbose_name="em promoção")),
                ("position", models.IntegerField(default=0, verbose_name="posição")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="atualizado em")),
                ("product", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="variants", to="merchman.product", verbose_name="produto")),
            ],
            options={
                "verbose_name": "variante",
                "verbose_name_plural": "variantes",
                "ordering": ["product", "-is_master", "position"],
                "constraints": [models.UniqueConstraint(condition=models.Q(("is_master", True)), fields=("product",), name="unique_master_per_product")],
            },
        ),
        migrations.CreateModel(
            name="HistoricalProduct",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("uuid", models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name="UUID")),
                ("sku", models.CharField(db_index=True, max_length=100, verbose_name="SKU")),
                ("name", models.CharField(max_length=200, verbose_name="nome")),
                ("short_description", models.CharField(blank=True, help_text="Descrição resumida para listagens (máx. 255 caracteres)", max_length=255, verbose_name="descrição curta")),
                ("long_description", models.TextField(blank=True, help_text="Descrição completa do produto", verbose_name="descrição longa")),
                ("is_published", models.BooleanField(db_index=True, default=True, help_text="Publicado no catálogo (Não = oculto/descontinuado)", verbose_name="publicado")),
                ("is_available", models.BooleanField(db_index=True, default=True, help_text="Disponível para venda (Não = pausado)", verbose_name="disponível")),
                ("metadata", models.JSONField(blank=True, default=dict, verbose_name="metadados")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="atualizado em")),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("history_user", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "historical produto",
                "verbose_name_plural": "historical produtos",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="HistoricalVariant",
            fields=[
                ("id", models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name="ID")),
                ("sku", models.CharField(db_index=True, max_length=100, verbose_name="SKU")),
                ("is_master", models.BooleanField(default=False, help_text="Variante principal do produto", verbose_name="principal")),
                ("on_sale", models.BooleanField(db_index=True, default=False, help_text="Preço promocional ativo", verbose_name="em promoção")),
                ("position", models.IntegerField(default=0, verbose_name="posição")),
                ("created_at", models.DateTimeField(blank=True, editable=False, verbose_name="criado em")),
                ("updated_at", models.DateTimeField(blank=True, editable=False, verbose_name="atualizado em")),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("history_user", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("product", models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name="+", to="merchman.product", verbose_name="produto")),
            ],
            options={
                "verbose_name": "historical variante",
                "verbose_name_plural": "historical variantes",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
