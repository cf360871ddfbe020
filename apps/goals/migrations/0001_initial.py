import datetime

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('entity_id', models.PositiveIntegerField(unique=True)),
                ('name', models.CharField(max_length=200)),
                ('frequency', models.CharField(choices=[('DAILY', 'Codziennie'), ('WEEKLY', 'Co tydzień'), ('MONTHLY', 'Co miesiąc'), ('YEARLY', 'Co rok')], default='DAILY', max_length=20)),
                ('completed', models.BooleanField(default=False)),
                ('start_date', models.DateField(default=datetime.date(2025, 1, 1))),
                ('end_date', models.DateField(default=datetime.date(2025, 1, 1))),
                ('start_time', models.CharField(default='08:00', max_length=5)),
                ('end_time', models.CharField(default='18:00', max_length=5)),
                ('position', models.PositiveIntegerField(default=0)),
            ],
            options={
                'ordering': ['position'],
            },
        ),
        migrations.CreateModel(
            name='GoalCompletion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField()),
                ('goal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='completions', to='goals.goal')),
            ],
            options={
                'ordering': ['id'],
                'unique_together': {('goal', 'date')},
            },
        ),
    ]
