# Initial schema: locations, users, ride_posts, ride_interests

import django.core.validators
import django.db.models.deletion
import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Location',
            fields=[
                ('location_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('location_name', models.CharField(max_length=100)),
                ('location_type', models.CharField(
                    choices=[
                        ('residential', 'Residential'),
                        ('commercial', 'Commercial'),
                        ('terminal', 'Terminal')
                    ],
                    default='commercial',
                    max_length=20
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'locations',
                'ordering': ['location_name'],
                'constraints': [
                    models.UniqueConstraint(
                        django.db.models.functions.text.Lower('location_name'),
                        name='unique_location_name_ci'
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='CarpoolUser',
            fields=[
                ('user_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('contact_method', models.CharField(max_length=100)),
                ('contact_info', models.CharField(max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'users',
            },
        ),
        migrations.CreateModel(
            name='RidePost',
            fields=[
                ('post_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('post_type', models.CharField(
                    choices=[('offer', 'Offering a ride'), ('request', 'Requesting a ride')],
                    max_length=10
                )),
                ('days_of_week', models.JSONField(default=list)),
                ('departure_time', models.TimeField()),
                ('notes', models.TextField(blank=True, default='')),
                ('vehicle_model', models.CharField(blank=True, max_length=100, null=True)),
                ('available_seats', models.PositiveSmallIntegerField(
                    blank=True,
                    null=True,
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(10)
                    ]
                )),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='ride_posts',
                    to='carpool_main_app.carpooluser'
                )),
                ('origin', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='rides_from',
                    to='carpool_main_app.location'
                )),
                ('destination', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='rides_to',
                    to='carpool_main_app.location'
                )),
            ],
            options={
                'db_table': 'ride_posts',
                'indexes': [
                    models.Index(fields=['is_active', 'created_at'], name='ride_posts_active_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(
                            ('available_seats__isnull', True),
                            models.Q(('available_seats__gte', 1), ('available_seats__lte', 10)),
                            _connector='OR'
                        ),
                        name='ride_available_seats_range'
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='RideInterest',
            fields=[
                ('interest_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('interested_name', models.CharField(max_length=100)),
                ('contact_method', models.CharField(
                    choices=[
                        ('messenger', 'Messenger'),
                        ('viber', 'Viber'),
                        ('phone', 'Phone'),
                        ('telegram', 'Telegram')
                    ],
                    max_length=20
                )),
                ('contact_info', models.CharField(max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('ride', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='interests',
                    to='carpool_main_app.ridepost'
                )),
            ],
            options={
                'db_table': 'ride_interests',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(
                        models.F('ride'),
                        django.db.models.functions.text.Lower('interested_name'),
                        name='unique_ride_interest_ci'
                    ),
                ],
            },
        ),
    ]
